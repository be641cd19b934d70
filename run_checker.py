#!/usr/bin/env python3
# run_checker.py
# This file is part of Propcheck - Propositional Entailment by Enumeration
#
# Command-line interface for satisfiability and entailment checking

import sys
import argparse
from typing import Optional

from parser import lex, parse_tokens, FormulaError, KnowledgeBaseError
from logic import (
    EngineConfig,
    ResourceLimitExceeded,
    check_entailment_text,
    format_assignment,
    satisfiability_report,
)
from logic.config import DEFAULT_MAX_ATOMS
from utils.formatting import format_report, format_tokens, split_knowledge_base
from utils.logger import configure_logging, get_logger


def read_line(prompt: str, value: Optional[str]) -> str:
    """Return ``value`` or prompt for it on stdin.

    Args:
        prompt: Text shown before reading
        value: Value already supplied on the command line

    Returns:
        The stripped input line

    Raises:
        ValueError: If the input is empty
    """
    if value is None:
        print(prompt)
        value = sys.stdin.readline()

    value = value.strip()
    if not value:
        raise ValueError("Input is empty")
    return value


def run_satisfy(formula_text: str, config: EngineConfig) -> int:
    """Print tokens, AST, atoms and the assignment partition of a formula.

    Args:
        formula_text: Formula to analyse
        config: Engine configuration

    Returns:
        Exit code
    """
    logger = get_logger()

    tokens = lex(formula_text)
    logger.info(f"Tokens: {format_tokens(tokens)}")

    ast = parse_tokens(tokens)
    logger.info(f"AST: {ast!r}")

    report = satisfiability_report(ast, config)
    logger.info(f"Atoms: {{{', '.join(sorted(report.atoms))}}}")

    for line in format_report(report):
        logger.info(line)
    return 0


def run_entail(
    kb_text: str, query_text: str, config: EngineConfig, explain: bool
) -> int:
    """Print whether the knowledge base entails the query.

    Args:
        kb_text: Comma-separated knowledge-base formulas
        query_text: Formula α
        config: Engine configuration
        explain: Print a counter-model when the entailment fails

    Returns:
        Exit code
    """
    logger = get_logger()

    knowledge_base = split_knowledge_base(kb_text)
    logger.debug(f"Knowledge base: {knowledge_base}")

    result = check_entailment_text(knowledge_base, query_text, config)
    logger.entailment_verdict(result.entails)

    if explain and result.counter_model is not None:
        logger.info(f"Counter-model: {format_assignment(result.counter_model)}")
    return 0


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Propositional satisfiability and entailment by truth tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_checker.py satisfy "if a then b"
  python run_checker.py entail --kb "a, if a then b" --query "b"
  python run_checker.py entail --kb "a or b" --query "a" --explain
  python run_checker.py --debug satisfy "not a or b"

Formula syntax:
  atoms are runs of letters; keywords are not, and, or, if ... then,
  iff ... then; parentheses group. AND and OR fold left to right.
        """,
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--max-atoms",
        type=int,
        default=DEFAULT_MAX_ATOMS,
        help=f"Largest atom count to enumerate (default: {DEFAULT_MAX_ATOMS})",
    )

    subparsers = parser.add_subparsers(dest="mode", required=True)

    satisfy = subparsers.add_parser(
        "satisfy", help="List satisfying and falsifying assignments of a formula"
    )
    satisfy.add_argument(
        "formula", nargs="?", help="Formula text (read from stdin if omitted)"
    )

    entail = subparsers.add_parser(
        "entail", help="Decide whether a knowledge base entails a formula"
    )
    entail.add_argument(
        "--kb", help="Comma-separated knowledge-base formulas (stdin if omitted)"
    )
    entail.add_argument("--query", help="Formula to entail (stdin if omitted)")
    entail.add_argument(
        "--explain",
        action="store_true",
        help="Print a counter-model when the entailment fails",
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the checker.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(debug=args.debug)
    logger = get_logger()

    try:
        config = EngineConfig(max_atoms=args.max_atoms)

        if args.mode == "satisfy":
            formula = read_line("Please enter a logical formula:", args.formula)
            if args.verbose:
                logger.formula_loaded("Formula", formula)
            return run_satisfy(formula, config)

        kb_text = read_line("Please enter the knowledge base (comma separated):", args.kb)
        query_text = read_line("Please enter the formula to entail:", args.query)
        if args.verbose:
            logger.formula_loaded("Knowledge base", kb_text)
            logger.formula_loaded("Query", query_text)
        return run_entail(kb_text, query_text, config, args.explain)

    except KnowledgeBaseError as e:
        logger.error(f"Knowledge base error: {e}")
        return 2

    except FormulaError as e:
        logger.error(f"Formula error: {e}")
        return 2

    except ResourceLimitExceeded as e:
        logger.error(f"Resource limit: {e}")
        return 3

    except ValueError as e:
        logger.error(f"Input error: {e}")
        return 2

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4


if __name__ == "__main__":
    sys.exit(main())

"""CLI for parsing citations, extracting references and querying the corpus."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING, Any

from corpus.models.enums import CitationStyle, EUReferenceType
from engine.exceptions import LegalEngineError
from engine.legal_parser.amendment_parser import extract_amendment_references
from engine.legal_parser.citation_formatter import format_citation
from engine.legal_parser.citation_parser import parse_citation
from engine.legal_parser.cross_reference_extractor import extract_cross_references
from engine.legal_parser.eu_reference_parser import extract_eu_references

if TYPE_CHECKING:
    from pydantic import BaseModel

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)-5.5s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


def _print_model(model: BaseModel) -> None:
    print(model.model_dump_json(indent=2))


def _print_records(records: list[Any]) -> None:
    print(json.dumps([asdict(r) for r in records], ensure_ascii=False, indent=2))


def _read_text(text: str | None, file: Path | None) -> str:
    """Return text from the argument, a file, or stdin."""
    if file is not None:
        return file.read_text(encoding="utf-8")
    if text is not None:
        return text
    return sys.stdin.read()


async def validate_command(citation: str) -> int:
    """Validate a citation against the corpus.

    Returns:
        0 if the cited document (and provision) exist, 1 otherwise.
    """
    from corpus.models.base import async_session_maker
    from engine.legal_parser.citation_validator import validate_citation

    async with async_session_maker() as session:
        result = await validate_citation(session, citation)

    _print_model(result)
    for warning in result.warnings:
        logger.warning(warning)
    return 0 if result.document_exists and result.provision_exists else 1


async def provision_at_command(
    document_id: str,
    provision_ref: str,
    date: str,
    include_amendments: bool = False,
) -> int:
    """Print the text of a provision as it stood on a date."""
    from corpus.models.base import async_session_maker
    from engine.temporal.provision_resolver import resolve_provision_at

    async with async_session_maker() as session:
        result = await resolve_provision_at(
            session,
            document_id,
            provision_ref,
            date,
            include_amendments=include_amendments,
        )

    _print_model(result)
    return 0 if result.status != "not_found" else 1


async def provisions_command(
    document_id: str,
    provision_ref: str | None = None,
    as_of_date: str | None = None,
) -> int:
    """Print the provisions of a document, current or as of a date."""
    from corpus.models.base import async_session_maker
    from engine.temporal.provision_lookup import get_provisions_at

    async with async_session_maker() as session:
        result = await get_provisions_at(session, document_id, provision_ref, as_of_date)

    _print_model(result)
    return 0 if result.provisions else 1


async def implementations_command(
    eu_document_id: str,
    primary_only: bool = False,
    in_force_only: bool = False,
) -> int:
    """Print the national statutes referring to an EU instrument."""
    from corpus.models.base import async_session_maker
    from engine.compliance.implementations import get_slovenian_implementations

    async with async_session_maker() as session:
        result = await get_slovenian_implementations(
            session,
            eu_document_id,
            primary_only=primary_only,
            in_force_only=in_force_only,
        )

    _print_model(result)
    return 0


async def currency_command(
    document_id: str,
    provision_ref: str | None = None,
    as_of_date: str | None = None,
) -> int:
    """Check whether a document or provision is in force."""
    from corpus.models.base import async_session_maker
    from engine.compliance.currency import check_currency

    async with async_session_maker() as session:
        result = await check_currency(session, document_id, provision_ref, as_of_date)

    _print_model(result)
    return 0


async def eu_compliance_command(
    document_id: str,
    provision_ref: str | None = None,
    eu_document_id: str | None = None,
) -> int:
    """Print the EU compliance report of a document."""
    from corpus.models.base import async_session_maker
    from engine.compliance.eu_compliance import validate_eu_compliance

    async with async_session_maker() as session:
        report = await validate_eu_compliance(
            session, document_id, provision_ref, eu_document_id
        )

    _print_model(report)
    return 0


async def eu_basis_command(
    document_id: str,
    provision_ref: str | None = None,
    include_articles: bool = False,
    reference_types: list[str] | None = None,
) -> int:
    """Print the EU legal basis of a document or one provision."""
    from corpus.models.base import async_session_maker
    from engine.compliance.eu_basis import get_eu_basis, get_provision_eu_basis

    async with async_session_maker() as session:
        if provision_ref:
            result = await get_provision_eu_basis(session, document_id, provision_ref)
        else:
            types = [EUReferenceType(t) for t in reference_types or []]
            result = await get_eu_basis(
                session,
                document_id,
                include_articles=include_articles,
                reference_types=types or None,
            )

    _print_model(result)
    return 0


async def enrich_command(document_id: str) -> int:
    """Print the reference edges that ingestion would derive for a document.

    The corpus store is read-only here, so edges are printed rather than
    written.
    """
    from corpus.crud.documents import list_document_ids, list_provisions
    from corpus.models.base import async_session_maker
    from engine.enrichment import build_cross_references, build_eu_references

    async with async_session_maker() as session:
        provisions = await list_provisions(session, document_id)
        known_document_ids = await list_document_ids(session)

    if not provisions:
        logger.error(f"No provisions found for {document_id}")
        return 1

    texts = [(p.provision_ref, p.content) for p in provisions]
    edges = build_cross_references(document_id, texts, known_document_ids)
    candidates = build_eu_references(document_id, texts)
    logger.info(
        f"{document_id}: {len(edges)} cross-references, "
        f"{len(candidates)} EU references from {len(provisions)} provisions"
    )
    print(
        json.dumps(
            {
                "cross_references": [asdict(e) for e in edges],
                "eu_references": [asdict(c) for c in candidates],
            },
            ensure_ascii=False,
            indent=2,
        )
    )
    return 0


def _add_text_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "text", nargs="?", help="Text to scan (default: read from stdin)"
    )
    parser.add_argument("--file", type=Path, help="Read the text from a file")


def main() -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Slovenian legal citation and cross-reference CLI"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Parse a citation")
    parse_parser.add_argument("citation", help='e.g. "6. člen ZKP"')

    # Format command
    format_parser = subparsers.add_parser(
        "format", help="Re-render a citation in a standard style"
    )
    format_parser.add_argument("citation", help='e.g. "ZKP, 6. člen"')
    format_parser.add_argument(
        "--style",
        choices=[s.value for s in CitationStyle],
        default=CitationStyle.FULL.value,
        help="Citation style (default: full)",
    )

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate", help="Check a citation against the corpus"
    )
    validate_parser.add_argument("citation", help="Citation to validate")

    # Extraction commands
    xrefs_parser = subparsers.add_parser(
        "xrefs", help="Extract provision cross-references from text"
    )
    _add_text_arguments(xrefs_parser)

    eu_refs_parser = subparsers.add_parser(
        "eu-refs", help="Extract EU directive and regulation references from text"
    )
    _add_text_arguments(eu_refs_parser)

    amendments_parser = subparsers.add_parser(
        "amendments", help="Extract amendment annotations from provision text"
    )
    _add_text_arguments(amendments_parser)

    # Provision-at command
    provision_at_parser = subparsers.add_parser(
        "provision-at", help="Show a provision as it stood on a date"
    )
    provision_at_parser.add_argument("document_id", help="Corpus document id")
    provision_at_parser.add_argument("provision_ref", help='Provision, e.g. "14"')
    provision_at_parser.add_argument("date", help="Date as YYYY-MM-DD")
    provision_at_parser.add_argument(
        "--amendments",
        action="store_true",
        help="Include statutes recorded as amending the provision",
    )

    # Provisions command
    provisions_parser = subparsers.add_parser(
        "provisions", help="List the provisions of a document"
    )
    provisions_parser.add_argument("document_id", help="Corpus document id")
    provisions_parser.add_argument("--provision", help="Provision reference")
    provisions_parser.add_argument(
        "--as-of", help="Date as YYYY-MM-DD (default: current text)"
    )

    # Currency command
    currency_parser = subparsers.add_parser(
        "currency", help="Check whether a document is in force"
    )
    currency_parser.add_argument("document_id", help="Corpus document id")
    currency_parser.add_argument("--provision", help="Provision reference")
    currency_parser.add_argument("--as-of", help="Date as YYYY-MM-DD (default: today)")

    # EU compliance commands
    eu_compliance_parser = subparsers.add_parser(
        "eu-compliance", help="Report EU transposition issues of a document"
    )
    eu_compliance_parser.add_argument("document_id", help="Corpus document id")
    eu_compliance_parser.add_argument("--provision", help="Provision reference")
    eu_compliance_parser.add_argument(
        "--eu-document", help='EU instrument id, e.g. "regulation:2016/679"'
    )

    eu_basis_parser = subparsers.add_parser(
        "eu-basis", help="List the EU instruments a document rests on"
    )
    eu_basis_parser.add_argument("document_id", help="Corpus document id")
    eu_basis_parser.add_argument("--provision", help="Provision reference")
    eu_basis_parser.add_argument(
        "--articles", action="store_true", help="Include cited EU articles"
    )
    eu_basis_parser.add_argument(
        "--types",
        nargs="+",
        choices=[t.value for t in EUReferenceType],
        help="Only these reference types",
    )

    eu_implementations_parser = subparsers.add_parser(
        "eu-implementations",
        help="List the national statutes referring to an EU instrument",
    )
    eu_implementations_parser.add_argument(
        "eu_document_id", help='EU instrument id, e.g. "directive:2016/680"'
    )
    eu_implementations_parser.add_argument(
        "--primary-only",
        action="store_true",
        help="Only primary implementing statutes",
    )
    eu_implementations_parser.add_argument(
        "--in-force-only", action="store_true", help="Only statutes in force"
    )

    # Enrich command
    enrich_parser = subparsers.add_parser(
        "enrich", help="Derive cross-reference and EU reference edges for a document"
    )
    enrich_parser.add_argument("document_id", help="Corpus document id")

    args = parser.parse_args()

    try:
        if args.command == "parse":
            _print_model(parse_citation(args.citation))
            return 0

        elif args.command == "format":
            print(format_citation(args.citation, args.style))
            return 0

        elif args.command == "validate":
            return asyncio.run(validate_command(args.citation))

        elif args.command == "xrefs":
            _print_records(extract_cross_references(_read_text(args.text, args.file)))
            return 0

        elif args.command == "eu-refs":
            _print_records(extract_eu_references(_read_text(args.text, args.file)))
            return 0

        elif args.command == "amendments":
            _print_records(
                extract_amendment_references(_read_text(args.text, args.file))
            )
            return 0

        elif args.command == "provision-at":
            return asyncio.run(
                provision_at_command(
                    args.document_id,
                    args.provision_ref,
                    args.date,
                    include_amendments=args.amendments,
                )
            )

        elif args.command == "provisions":
            return asyncio.run(
                provisions_command(args.document_id, args.provision, args.as_of)
            )

        elif args.command == "currency":
            return asyncio.run(
                currency_command(args.document_id, args.provision, args.as_of)
            )

        elif args.command == "eu-compliance":
            return asyncio.run(
                eu_compliance_command(
                    args.document_id, args.provision, args.eu_document
                )
            )

        elif args.command == "eu-basis":
            return asyncio.run(
                eu_basis_command(
                    args.document_id,
                    args.provision,
                    include_articles=args.articles,
                    reference_types=args.types,
                )
            )

        elif args.command == "eu-implementations":
            return asyncio.run(
                implementations_command(
                    args.eu_document_id,
                    primary_only=args.primary_only,
                    in_force_only=args.in_force_only,
                )
            )

        elif args.command == "enrich":
            return asyncio.run(enrich_command(args.document_id))

        else:
            parser.print_help()
            return 1

    except LegalEngineError as e:
        logger.error(str(e))
        return 2


if __name__ == "__main__":
    sys.exit(main())

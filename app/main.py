import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from app.config.settings import Settings
from app.logging.logger import Log
from app.processor.models import BytesRef, DocumentRef, UrlRef
from app.processor.processor import build_pipeline


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract text from a document and enrich it with a summary and tags.",
    )
    parser.add_argument("source", help="http(s) URL, data: URI, or local file path")
    parser.add_argument("--type", dest="declared_type", help="declared MIME type or extension")
    parser.add_argument("--name", dest="document_name", help="human-readable document name")
    parser.add_argument(
        "--instruction",
        type=Path,
        help="file with a custom instruction template using {extracted_text}",
    )
    return parser.parse_args(argv)


def _build_ref(source: str) -> tuple[DocumentRef, str | None]:
    if source.startswith(("http://", "https://", "data:")):
        return UrlRef(url=source), None
    path = Path(source)
    return BytesRef(data=path.read_bytes(), file_name=path.name), path.name


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: settings -> logging (stderr) -> pipeline -> JSON on stdout."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)

    ref, file_name = _build_ref(args.source)
    with build_pipeline(settings) as pipeline:
        if args.instruction is not None:
            template = args.instruction.read_text(encoding="utf-8")
            result = pipeline.run_with_custom_instruction(
                ref,
                template,
                declared_type=args.declared_type,
                file_name=file_name,
            )
        else:
            result = pipeline.run(
                ref,
                declared_type=args.declared_type,
                file_name=file_name,
                document_name=args.document_name or file_name,
            )
    json.dump(result.to_dict(), sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())

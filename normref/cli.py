from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from loguru import logger
import uvicorn

from normref.core.config import get_settings
from normref.core.exceptions import InputError, NormRefError
from normref.core.logging import configure_logging
from normref.parsing.references import extract_norm_refs


def _read_inputs(paths: list[str]) -> list[tuple[str, str]]:
    if not paths:
        return [("-", sys.stdin.read())]
    inputs = []
    for raw in paths:
        path = Path(raw)
        if not path.is_file():
            raise InputError(f"File not found: {path}")
        try:
            inputs.append((str(path), path.read_text(encoding="utf-8")))
        except UnicodeDecodeError as exc:
            raise InputError(f"Not a UTF-8 text file: {path}") from exc
    return inputs


def cmd_extract(paths: list[str], window: Optional[int], pretty: bool) -> None:
    if window is None:
        window = get_settings().act_number_window
    if window < 0:
        raise InputError("--window must be >= 0")

    inputs = _read_inputs(paths)
    for source, text in inputs:
        refs = extract_norm_refs(text, window=window)
        document: dict = {"norm_refs": [ref.to_dict() for ref in refs]}
        if len(inputs) > 1:
            document = {"source": source, **document}
        print(json.dumps(document, ensure_ascii=False, indent=2 if pretty else None))
        logger.info("{}: {} norm refs", source, len(refs))


def cmd_serve(host: Optional[str], port: Optional[int]) -> None:
    from normref.api.main import app as fastapi_app

    settings = get_settings()
    uvicorn.run(fastapi_app, host=host or settings.host, port=port or settings.port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Armenian norm reference extractor")
    sub = parser.add_subparsers(dest="command", required=True)
    extract = sub.add_parser("extract", help="extract norm refs from files or stdin")
    extract.add_argument("paths", nargs="*")
    extract.add_argument("--window", type=int, default=None)
    extract.add_argument("--pretty", action="store_true")
    serve = sub.add_parser("serve")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        configure_logging(get_settings().log_level)
        if args.command == "extract":
            cmd_extract(args.paths, args.window, args.pretty)
        elif args.command == "serve":
            cmd_serve(args.host, args.port)
    except NormRefError as exc:
        logger.error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

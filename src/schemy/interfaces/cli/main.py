import argparse
import json
import logging
from pathlib import Path
from typing import Optional

import colorlog
import yaml

from schemy import __version__ as _PACKAGE_VERSION
from schemy.exceptions import SchemaError


def setup_logging(
    verbose: bool = False, warnings_only: bool = False, errors_only: bool = False
) -> None:
    """Route schemy's log records to a colored stderr handler on the root logger."""
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = (
        "%(asctime)s:%(levelname)s:%(name)s in %(filename)s:%(funcName)s:%(lineno)d: %(message)s"
    )
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    stream_handler = colorlog.StreamHandler()
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    elif warnings_only:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate a data file against a schema file.

    Prints the projected body as JSON when the data is valid, or one error
    per line otherwise.

    Returns:
        0 if the data is valid
        2 if validation errors were found
        3 if the schema or data file could not be loaded
    """
    from schemy.api import Schemy
    from schemy.validation.config import load_data, load_declaration

    schema_path = Path(args.schema).resolve()
    data_path = Path(args.data).resolve()

    try:
        declaration = load_declaration(schema_path)
        schema = Schemy(declaration, strict=not bool(getattr(args, "non_strict", False)))
    except (FileNotFoundError, yaml.YAMLError) as e:
        logging.error("Failed to load schema %s: %s", schema_path, e)
        return 3
    except SchemaError as e:
        logging.error("Invalid schema %s: %s", schema_path, e)
        return 3

    try:
        data = load_data(data_path)
    except (FileNotFoundError, yaml.YAMLError) as e:
        logging.error("Failed to load data %s: %s", data_path, e)
        return 3

    logging.info("Validating %s against %s", data_path.name, schema_path.name)

    if not schema.validate(data):
        errors = schema.get_grouped_validation_errors()
        logging.warning("Validation failed for %s: %d errors", data_path.name, len(errors))
        if getattr(args, "grouped", False):
            print(json.dumps([e.to_dict() for e in errors], indent=2, ensure_ascii=False))
        else:
            for message in schema.get_validation_errors():
                print(f"❌ {message}")
        return 2

    logging.info("Validation passed for %s", data_path.name)
    body = schema.get_body(
        include_all=bool(getattr(args, "include_all", False)),
        order_body=bool(getattr(args, "order_body", False)),
    )
    print(json.dumps(body, indent=2, ensure_ascii=False, default=str))
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    print(_PACKAGE_VERSION)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="schemy",
        description=f"Schemy data validation (v{_PACKAGE_VERSION})",
    )
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    p.add_argument(
        "--warnings-only",
        action="store_true",
        help="Show only warnings and errors (overrides --verbose)",
    )
    p.add_argument(
        "--errors-only",
        action="store_true",
        help="Show only errors (overrides --warnings-only and --verbose)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Validate a YAML/JSON data file against a schema")
    p_validate.add_argument("schema", help="Path to the schema declaration (YAML or JSON)")
    p_validate.add_argument("data", help="Path to the data document (YAML or JSON)")
    p_validate.add_argument(
        "--non-strict",
        action="store_true",
        help="Allow keys not declared in the schema (they are dropped from the output)",
    )
    p_validate.add_argument(
        "--include-all",
        action="store_true",
        help="Keep undeclared keys in the output (only with --non-strict)",
    )
    p_validate.add_argument(
        "--order-body",
        action="store_true",
        help="Order output keys as declared in the schema",
    )
    p_validate.add_argument(
        "--grouped",
        action="store_true",
        help="Print errors as JSON objects with their property keys",
    )
    p_validate.set_defaults(func=cmd_validate)

    p_version = sub.add_parser("version", help="Print the schemy version")
    p_version.set_defaults(func=cmd_version)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=bool(args.verbose),
        warnings_only=bool(getattr(args, "warnings_only", False)),
        errors_only=bool(getattr(args, "errors_only", False)),
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())

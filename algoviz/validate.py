# validate.py
import argparse
import json
import logging
from pathlib import Path

import jsonschema

from algoviz.config import setup_logging

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "trace_schema.json"


def load_schema(schema_path=None) -> dict:
    return json.loads(Path(schema_path or SCHEMA_PATH).read_text(encoding="utf-8"))


def validate_trace(trace: dict, schema=None):
    """Raise jsonschema.ValidationError if the trace does not conform."""
    jsonschema.validate(instance=trace, schema=schema or load_schema())


def validate_trace_file(json_path, schema_path=None) -> bool:
    """Validate a trace JSON file against the trace schema."""
    json_path = Path(json_path)
    logger.info("--- Validating: %s ---", json_path.name)
    try:
        # Load schema and data
        schema = load_schema(schema_path)
        data = json.loads(json_path.read_text(encoding="utf-8"))

        validate_trace(data, schema)

        logger.info("[Success] File %s conforms to trace format 1.0.", json_path.name)
        return True
    except jsonschema.exceptions.ValidationError as e:
        logger.error("[Failed] File %s failed validation.", json_path.name)
        logger.error("Error: %s", e.message)
        logger.error("Error path: %s", list(e.path))
        return False
    except FileNotFoundError:
        logger.error("[Failed] File not found: %s or %s", json_path, schema_path or SCHEMA_PATH)
        return False
    except json.JSONDecodeError:
        logger.error("[Failed] File content is not valid JSON format: %s", json_path)
        return False


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Validate generated trace JSON files.")
    parser.add_argument("data_dir", nargs="?", default="traces", help="Directory searched recursively for *.json")
    parser.add_argument("--schema", default=None, help="Schema file (defaults to the bundled trace schema)")
    args = parser.parse_args(argv)

    setup_logging()
    data_dir = Path(args.data_dir)
    all_files = sorted(data_dir.rglob("*.json"))
    if not all_files:
        logger.warning("No .json files found in directory '%s'.", data_dir)

    success_count = 0
    for json_file in all_files:
        if validate_trace_file(json_file, args.schema):
            success_count += 1

    logger.info("--- Validation Complete ---")
    logger.info("Total: %d files, Success: %d, Failed: %d.",
                len(all_files), success_count, len(all_files) - success_count)
    return 0 if success_count == len(all_files) else 1


if __name__ == "__main__":
    raise SystemExit(main())

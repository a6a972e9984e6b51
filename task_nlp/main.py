import argparse
import json
import sys

from pydantic import ValidationError

from task_nlp.config.settings import get_settings
from task_nlp.services.task_parser import TaskParser
from task_nlp.utils.logger import setup_logger


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="task-nlp",
        description="Parse a quick-add task line into structured fields.",
    )
    parser.add_argument("text", nargs="+", help="Task text, e.g. 'Call mom tomorrow 30 min #family'")
    parser.add_argument("--language", "-l", help="Language code (defaults to TASK_NLP_LANGUAGE or en)")
    parser.add_argument("--due-by-default", action="store_true", help="Send bare dates to the due field")
    parser.add_argument("--json", action="store_true", help="Print the parsed record as JSON")
    return parser


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        print("Please check your TASK_NLP_* environment variables or .env file", file=sys.stderr)
        return 1

    logger = setup_logger("task_nlp", settings.log_level)

    overrides = {}
    if args.language:
        overrides["language_code"] = args.language
    if args.due_by_default:
        overrides["default_to_scheduled"] = False

    task_parser = TaskParser.from_settings(settings, **overrides)
    logger.debug(f"Using language pack {task_parser.pack.code}")

    parsed = task_parser.parse(" ".join(args.text))
    if args.json:
        print(json.dumps(parsed.model_dump(mode="json"), ensure_ascii=False, indent=2))
    else:
        print(task_parser.get_preview_text(parsed))
    return 0


if __name__ == "__main__":
    sys.exit(main())

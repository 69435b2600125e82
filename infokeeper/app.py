import argparse
from pathlib import Path
from typing import List

from . import __version__
from .controllers import RecordFormController, RecordListController
from .enums import Gender, JobTitle
from .env import Settings, load_env
from .logger import get_logger
from .models import Record
from .repository import RecordRepository
from .service import RecordService
from .validator import FieldValidation, error_message, validate_fields


def build_service(db_path: Path, settings: Settings) -> RecordService:
    logger = get_logger(level=settings.log_level, log_dir=settings.log_dir, enable_console=False)
    return RecordService(RecordRepository(db_path), logger=logger)


def _parse_choice(enum_cls, text: str):
    try:
        return enum_cls.from_input(text)
    except ValueError as e:
        raise SystemExit(str(e))


def _print_errors(validation: FieldValidation) -> None:
    print("Invalid:")
    for name, error in validation.errors():
        print(f" - {name}: {error_message(error)}")


def _format_record(record: Record) -> str:
    return (
        f"ID: {record.id}\n"
        f"  Name: {record.name}\n"
        f"  Age: {record.age}\n"
        f"  Job title: {record.job_title.label}\n"
        f"  Gender: {record.gender.label}"
    )


def _submit(controller: RecordFormController, args: argparse.Namespace) -> None:
    job_title = _parse_choice(JobTitle, args.job_title) if args.job_title else JobTitle.NOT_SELECTED
    gender = _parse_choice(Gender, args.gender) if args.gender else Gender.NOT_SELECTED
    controller.submit(args.name or "", args.age or "", job_title, gender)
    state = controller.state
    if not state.validation.is_valid:
        _print_errors(state.validation)
        raise SystemExit(2)
    if not state.saved:
        raise SystemExit(f"Save failed: {state.error}")


def cmd_add(args: argparse.Namespace) -> None:
    controller = RecordFormController(args.service)
    _submit(controller, args)
    print(f"Saved record {controller.state.record_id}")


def cmd_update(args: argparse.Namespace) -> None:
    existing = {r.id: r for r in args.service.list_records()}
    record = existing.get(args.id)
    if record is None:
        raise SystemExit(f"Record not found: {args.id}")
    # Fields left out keep their stored values
    args.name = args.name if args.name is not None else record.name
    args.age = args.age if args.age is not None else str(record.age)
    args.job_title = args.job_title or record.job_title.value
    args.gender = args.gender or record.gender.value
    _submit(RecordFormController(args.service, record=record), args)
    print(f"Updated record {record.id}")


def cmd_delete(args: argparse.Namespace) -> None:
    controller = RecordListController(args.service)
    if not controller.delete(args.id):
        raise SystemExit(f"Delete failed: {controller.state.error}")
    print(f"Deleted record {args.id}")


def cmd_list(args: argparse.Namespace) -> None:
    records = RecordListController(args.service).state.records
    if not records:
        print("No records in store.")
        return
    print(f"Found {len(records)} records:\n")
    for record in records:
        print(_format_record(record))
        print()


def cmd_validate(args: argparse.Namespace) -> None:
    job_title = _parse_choice(JobTitle, args.job_title) if args.job_title else JobTitle.NOT_SELECTED
    gender = _parse_choice(Gender, args.gender) if args.gender else Gender.NOT_SELECTED
    validation = validate_fields(args.name or "", args.age or "", job_title, gender)
    if not validation.is_valid:
        _print_errors(validation)
        raise SystemExit(2)
    print("Valid")


def _print_choices(members: List) -> None:
    for m in members:
        print(f"{m.value:<20} {m.label}")


def cmd_jobs(args: argparse.Namespace) -> None:
    _print_choices(JobTitle.selectable())


def cmd_genders(args: argparse.Namespace) -> None:
    _print_choices(Gender.selectable())


def _add_record_fields(p: argparse.ArgumentParser, required: bool) -> None:
    p.add_argument("--name", required=required, help="Full name (max 20 characters)")
    p.add_argument("--age", required=required, help="Age in years (1-100)")
    p.add_argument("--job-title", required=required, help="Job title, see the 'jobs' command")
    p.add_argument("--gender", required=required, help="MALE or FEMALE")


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="infokeeper", description="InfoKeeper: keep a list of personal records")
    parser.add_argument("--version", action="store_true", help="Show version")
    parser.add_argument("--db", default=str(settings.db_path), help=f"Path to SQLite database (default: {settings.db_path})")

    subparsers = parser.add_subparsers(dest="command")

    add = subparsers.add_parser("add", help="Validate and save a new record")
    _add_record_fields(add, required=False)
    add.set_defaults(func=cmd_add, needs_store=True)

    upd = subparsers.add_parser("update", help="Change fields of a stored record")
    upd.add_argument("--id", type=int, required=True, help="Record id")
    _add_record_fields(upd, required=False)
    upd.set_defaults(func=cmd_update, needs_store=True)

    dele = subparsers.add_parser("delete", help="Delete a record by id")
    dele.add_argument("--id", type=int, required=True, help="Record id")
    dele.set_defaults(func=cmd_delete, needs_store=True)

    lst = subparsers.add_parser("list", help="List all stored records, newest first")
    lst.set_defaults(func=cmd_list, needs_store=True)

    val = subparsers.add_parser("validate", help="Validate record fields without saving")
    _add_record_fields(val, required=False)
    val.set_defaults(func=cmd_validate, needs_store=False)

    jobs = subparsers.add_parser("jobs", help="List selectable job titles")
    jobs.set_defaults(func=cmd_jobs, needs_store=False)

    genders = subparsers.add_parser("genders", help="List selectable genders")
    genders.set_defaults(func=cmd_genders, needs_store=False)

    return parser


def main(argv=None):
    # Load .env if present (INFOKEEPER_DB, INFOKEEPER_LOG_LEVEL, ...)
    load_env()
    settings = Settings.from_env()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    if not hasattr(args, "func"):
        parser.print_help()
        return

    if not args.needs_store:
        args.func(args)
        return

    args.service = build_service(Path(args.db), settings)
    try:
        args.func(args)
    finally:
        args.service.logger.log_metrics_summary()
        args.service.repository.close()


if __name__ == "__main__":
    main()

# src/codebundle/cli.py
import sys
import shlex
import argparse
from pathlib import Path

# Module imports
from codebundle.config import DEFAULT_SORT, SORT_MODES
from codebundle.core.languages import resolve_language, supported_languages
from codebundle.core.orderer import order_files
from codebundle.core.response import create_response_file, parse_bool
from codebundle.core.selector import select_files
from codebundle.core.writer import write_bundle
from codebundle.errors import CodeBundleError
from codebundle.models import BundleOptions

class ResponseFileParser(argparse.ArgumentParser):
    """Expands '@file.rsp' arguments, splitting each line like a shell would."""
    def convert_arg_line_to_args(self, arg_line):
        return shlex.split(arg_line)

def flag_value(text: str) -> bool:
    """Explicit value for a boolean flag, e.g. '-n True' from a response file."""
    value = parse_bool(text, strict=True)
    if value is None:
        raise argparse.ArgumentTypeError(f"expected true or false, got '{text}'")
    return value

def create_arg_parser():
    parser = ResponseFileParser(
        prog="codebundle",
        description="Bundle the source files of a directory into a single file.",
        fromfile_prefix_chars="@",
    )

    # Options shared by every subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--strict", action="store_true", help="Exit with status 1 when the command reports an error")

    sub = parser.add_subparsers(dest="command", required=True)

    pb = sub.add_parser("bundle", aliases=["b"], parents=[common], help="Bundle code files to a single file")
    pb.add_argument("-o", "--output", type=Path, required=True, help="File path and name of the bundle")
    pb.add_argument(
        "-l", "--language",
        type=str,
        required=True,
        help=f"Language to include: {', '.join(supported_languages())}",
    )
    pb.add_argument(
        "-n", "--note",
        nargs="?", const=True, default=False, type=flag_value,
        help="Write a source-path comment for every bundled file",
    )
    pb.add_argument("-s", "--sort", type=str, default=DEFAULT_SORT, help=f"Sort files by {' or '.join(SORT_MODES)} (default: {DEFAULT_SORT})")
    pb.add_argument(
        "-r", "--remove-empty-lines",
        nargs="?", const=True, default=False, type=flag_value,
        help="Drop empty and whitespace-only lines",
    )
    pb.add_argument("-a", "--author", type=str, default=None, help="Name of the author")
    pb.add_argument("-d", "--directory", type=Path, default=Path("."), help="Directory to bundle (default: current)")
    pb.add_argument(
        "--segment-markers",
        action="store_true",
        help="Only skip paths with a 'bin' or 'debug' segment instead of any path containing those words",
    )
    pb.set_defaults(func=run_bundle)

    pr = sub.add_parser("create-rsp", parents=[common], help="Create a response file for the bundle command")
    pr.add_argument("--strict-bool", action="store_true", help="Ask again on answers that are not true/false")
    pr.set_defaults(func=run_create_rsp)

    return parser

def options_from_args(args) -> BundleOptions:
    return BundleOptions(
        output=args.output,
        language=args.language,
        include_note=args.note,
        sort=args.sort,
        remove_empty_lines=args.remove_empty_lines,
        author=args.author,
        directory=args.directory,
        strict=args.strict,
        segment_markers=args.segment_markers,
    )

def run_bundle(args) -> int:
    options = options_from_args(args)

    print(f"--- codebundle ---")
    print(f"Directory: {options.directory}")
    print(f"Output:    {options.output}")

    # Fails before the output file is touched
    spec = resolve_language(options.language)
    print(f"Mode:      {'All files' if spec.matches_all else f'{spec.name} ({spec.pattern})'}")

    files = select_files(
        options.directory,
        spec,
        exclude=options.output,
        segment_markers=options.segment_markers,
    )
    files = order_files(files, options.sort)

    if not files:
        print("No matching files found.")

    result = write_bundle(options.output, files, options)
    print(f"Files:     {len(result.files_written)}")
    print(f"\nSuccess! Bundle written to: {Path(result.output).resolve()}")

    if not result.ok:
        print(f"Skipped {len(result.skipped)} unreadable file(s).", file=sys.stderr)
        return 1 if options.strict else 0
    return 0

def run_create_rsp(args) -> int:
    rsp_file = create_response_file(strict_bool=args.strict_bool)
    print(f"Response file created: {rsp_file}")
    print(f"Replay it with: codebundle @{rsp_file}")
    return 0

def main():
    try:
        parser = create_arg_parser()
        args = parser.parse_args()

        try:
            status = args.func(args)
        except CodeBundleError as e:
            print(f"Error: {e}", file=sys.stderr)
            status = 1 if args.strict else 0

        if status:
            sys.exit(status)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()

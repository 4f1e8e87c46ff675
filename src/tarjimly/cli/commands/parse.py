"""
Parse '<text> <from> <to>' into a translation request.
"""

from rich import print_json
from rich.markup import escape

from tarjimly.cli.commands.common import console, fail, load_vocabulary
from tarjimly.core.resolve import RequestError, resolve_request
from tarjimly.core.segment import split_args


def add_subparser(subparsers):
    parser = subparsers.add_parser(
        "parse",
        help="Split text and languages, e.g. `parse hello scots gaelic italian`."
    )
    parser.add_argument("tokens", nargs="*", help="Text followed by source and target language.")
    parser.add_argument("--json", action="store_true", help="Print the request as JSON.")
    parser.set_defaults(func=run)


def run(args):
    vocabulary = load_vocabulary(args)
    tokens = split_args(args.tokens)

    try:
        request = resolve_request(tokens, vocabulary)
    except RequestError as e:
        fail(str(e))

    if args.json:
        print_json(data=request.to_dict())
        return

    console.print(
        f"In [black on yellow]{escape(request.target_name)}[/], "
        f"[bold white on blue]{escape(request.text)}[/] "
        f"is requested from {escape(request.source_name)}",
        highlight=False,
        soft_wrap=True,
    )

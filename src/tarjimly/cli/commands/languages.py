"""
List known languages.
"""

from rich.table import Table

from tarjimly.cli.commands.common import console, load_vocabulary


def add_subparser(subparsers):
    parser = subparsers.add_parser("languages", help="List language codes and names.")
    parser.add_argument("-s", "--search", help="Only show codes or names containing this.")
    parser.set_defaults(func=run)


def run(args):
    vocabulary = load_vocabulary(args)

    if args.search:
        entries = vocabulary.search(args.search)
    else:
        entries = list(vocabulary.names.items())

    if not entries:
        console.print(f"No languages match {args.search!r}.")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Code")
    table.add_column("Name")
    for code, name in sorted(entries):
        table.add_row(code, name)

    console.print(table)

"""
FragmentsCommand — Browse the fragment library
"""

from ..commands.base import BaseCommand
from ..core.fragments import UnknownFragmentError
from ..presentation.symbols import safe_print
from ..presentation.template import OutputTemplate


class FragmentsCommand(BaseCommand):
    """List fragments or print one fragment body."""

    def list(self):
        template = OutputTemplate(symbols=self.symbols)
        template.header("PRIMER FRAGMENTS", "Library")
        rows = [
            {"id": fragment.id, "title": fragment.title, "description": fragment.description}
            for fragment in self.library
        ]
        template.section("FRAGMENTS", template.format_table(rows, ["ID", "Title", "Description"]))
        template.footer(f"{len(rows)} fragment(s) | primer fragments <id> to view one")
        print(template.render())

    def show(self, fragment_id: str) -> bool:
        try:
            fragment = self.library.get(fragment_id)
        except UnknownFragmentError as e:
            print(f"Error: {e}")
            return False
        safe_print(fragment.body.strip("\n"))
        return True


def register_parser(subparsers):
    """Register fragments command parser."""
    p = subparsers.add_parser('fragments', help='List prompt fragments or show one')
    p.add_argument('fragment_id', nargs='?', help='Fragment id to print')
    return p


def handle(cli, args):
    """Handle fragments command dispatch."""
    if args.fragment_id:
        cli._fragments_cmd.show(args.fragment_id)
    else:
        cli._fragments_cmd.list()

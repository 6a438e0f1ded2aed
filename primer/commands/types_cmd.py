"""
TypesCommand — Show the work-type decision table
"""

from ..commands.base import BaseCommand
from ..core.worktypes import WORK_TYPES, OPTIONAL_CONTEXTS
from ..presentation.template import OutputTemplate


class TypesCommand(BaseCommand):
    """Display each work type with the fragments and steps it implies."""

    def list(self):
        template = OutputTemplate(symbols=self.symbols)
        template.header("PRIMER TYPES", "Work Types")

        rows = []
        for number, wt in enumerate(WORK_TYPES, 1):
            if wt.is_custom:
                offers = "manual yes/no per fragment"
            else:
                steps = []
                if wt.offers_tech_stack:
                    steps.append("tech stack, project context")
                extra = [c for c in OPTIONAL_CONTEXTS if c not in wt.fragments and not wt.withholds(c)]
                if extra:
                    steps.append("+" + "/".join(extra))
                offers = "; ".join(steps) or "-"
            rows.append({
                "no": str(number),
                "type": wt.key,
                "fragments": ", ".join(wt.fragments),
                "offers": offers,
            })

        template.section("TYPES", template.format_table(rows, ["No", "Type", "Fragments", "Offers"]))
        template.footer(f"{len(rows)} work type(s) | primer compose --type <type>")
        print(template.render())


def register_parser(subparsers):
    """Register types command parser."""
    return subparsers.add_parser('types', help='Show work types and the fragments they imply')


def handle(cli, args):
    """Handle types command dispatch."""
    cli._types_cmd.list()

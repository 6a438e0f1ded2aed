"""
ComposeCommand — Interactive prompt composition

Walks the user through the decision tree:
  work type -> tech stack -> additional contexts -> project context -> question
(custom work type: work type -> eight yes/no questions -> question)

Every menu re-asks on invalid input. The decisions land on a Session;
rendering, printing and the clipboard copy happen once at the end.
The same flow runs non-interactively when answers come from flags.
"""

import sys
from typing import Dict, List, Optional

from ..commands.base import BaseCommand
from ..core import fragments as f
from ..core.composer import (
    Session,
    ComposedPrompt,
    PROJECT_FIELDS,
    PROJECT_FIELD_KEYS,
    available_contexts,
    parse_index_selection,
    add_project_context,
    choose_tech_context,
    offers_project_context,
    compose_prompt,
)
from ..core.worktypes import (
    WORK_TYPES,
    OPTIONAL_CONTEXTS,
    CUSTOM_CHOICES,
    WorkType,
    parse_work_type,
    work_type_keys,
)
from ..presentation.menus import format_menu, format_yes_no, format_selected
from ..presentation.symbols import safe_print
from ..presentation.template import OutputTemplate
from ..services.clipboard import copy_to_clipboard


YES_ANSWERS = ('y', 'yes')
NO_ANSWERS = ('n', 'no')


class ComposeCommand(BaseCommand):
    """Command for building a prompt from menu answers."""

    # -------------------------------------------------------------------------
    # Input primitives
    # -------------------------------------------------------------------------

    def _ask(self, prompt: str) -> str:
        return input(prompt)

    def _ask_yes_no(self, question: str, default: bool = False) -> bool:
        """Ask until the answer is yes, no, or empty (default)."""
        while True:
            answer = self._ask(format_yes_no(question, default)).strip().lower()
            if not answer:
                return default
            if answer in YES_ANSWERS:
                return True
            if answer in NO_ANSWERS:
                return False
            print("Please answer y or n.")

    # -------------------------------------------------------------------------
    # Menu steps
    # -------------------------------------------------------------------------

    def ask_work_type(self) -> WorkType:
        """Single-choice menu over the work-type table."""
        menu = format_menu(
            "What kind of work is this?",
            [(wt.label, ", ".join(wt.fragments)) for wt in WORK_TYPES],
            symbols=self.symbols,
            hint="Enter a number (or the name, e.g. 'refactoring')",
        )
        print(menu)
        while True:
            work_type = parse_work_type(self._ask(f"{self.symbols.prompt} "))
            if work_type is not None:
                return work_type
            print(f"Please choose 1-{len(WORK_TYPES)}.")

    def ask_tech_stack(self, session: Session) -> None:
        """Two-choice menu: tech-stack context or none."""
        if not session.work_type.offers_tech_stack:
            return
        tech = self.library.get(f.TECH)
        print()
        print(format_menu(
            "Add tech stack context?",
            [(tech.title, tech.description), ("None", "")],
            symbols=self.symbols,
        ))
        while True:
            answer = self._ask(f"{self.symbols.prompt} ").strip().lower()
            if answer in ('1', 'tech', f.TECH):
                choose_tech_context(session, True)
                return
            if answer in ('2', 'none'):
                choose_tech_context(session, False)
                return
            print("Please choose 1 or 2.")

    def ask_additional_contexts(self, session: Session) -> List[str]:
        """
        Multi-select menu over optional contexts not yet selected.

        Returns:
            Fragment ids that were added
        """
        candidates = available_contexts(session.work_type, session.selection)
        if not candidates:
            return []

        fragments = [self.library.get(fragment_id) for fragment_id in candidates]
        print()
        print(format_menu(
            "Add more context?",
            [(fragment.title, fragment.description) for fragment in fragments],
            symbols=self.symbols,
            hint="Comma-separated numbers (e.g. 1,3), or Enter / 'none' to skip",
        ))
        answer = self._ask(f"{self.symbols.prompt} ")

        added = []
        for index in parse_index_selection(answer, len(candidates)):
            if session.selection.add(candidates[index]):
                added.append(candidates[index])
        return added

    def ask_project_context(self, session: Session) -> bool:
        """Yes/no gate, then up to six free-text fields."""
        if not offers_project_context(session):
            return False
        print()
        if not self._ask_yes_no("Describe this project's specifics?"):
            return False

        print("Leave any field blank to skip it.")
        values: Dict[str, str] = {}
        for project_field in PROJECT_FIELDS:
            values[project_field.key] = self._ask(f"  {project_field.prompt}: ")

        if not add_project_context(session, values):
            print("No project details given; skipping project context.")
            return False
        return True

    def ask_custom(self, session: Session) -> None:
        """Eight independent yes/no questions, one per fragment."""
        print()
        print("Base prompt included. Choose the rest:")
        for fragment_id in CUSTOM_CHOICES:
            fragment = self.library.get(fragment_id)
            if self._ask_yes_no(f"  Include {fragment.title} ({fragment.description})?"):
                session.selection.add(fragment_id)

    def ask_question(self, session: Session) -> None:
        print()
        print("What do you want to ask? (optional, Enter to skip)")
        session.question = self._ask(f"{self.symbols.prompt} ")

    # -------------------------------------------------------------------------
    # Flows
    # -------------------------------------------------------------------------

    def build_session(self) -> Session:
        """Run every menu step and return the filled-in session."""
        session = Session.start(self.ask_work_type())

        if session.work_type.is_custom:
            self.ask_custom(session)
        else:
            self.ask_tech_stack(session)
            self.ask_additional_contexts(session)
            self.ask_project_context(session)

        self.ask_question(session)
        return session

    def interactive(self, raw: bool = False, copy: Optional[bool] = None, wait: Optional[bool] = None):
        """
        Run the interactive flow and deliver the prompt.

        Returns:
            ComposedPrompt, or None if input ended early
        """
        try:
            session = self.build_session()
        except EOFError:
            print("\nCancelled.")
            return None

        result = ComposedPrompt(
            text=session.render(self.library),
            selection=session.selection.ids,
            work_type=session.work_type.key,
        )
        self.deliver(result, raw=raw, copy=copy, wait=wait)
        return result

    def from_answers(
        self,
        work_type: str,
        tech: bool = False,
        contexts: Optional[List[str]] = None,
        project: Optional[Dict[str, str]] = None,
        include: Optional[List[str]] = None,
        question: str = "",
        raw: bool = False,
        copy: Optional[bool] = None,
    ) -> ComposedPrompt:
        """Compose from flag values without prompting."""
        result = compose_prompt(
            work_type,
            tech_context=tech,
            contexts=contexts or [],
            project=project,
            custom=include or [],
            question=question,
            library=self.library,
        )
        for fragment_id in result.skipped:
            print(f"Warning: '{fragment_id}' is not offered for {work_type}; skipped.", file=sys.stderr)
        if project and f.PROJECT_CONTEXT not in result.selection and any(v.strip() for v in project.values()):
            print("Warning: project details need --tech and a work type that offers it; skipped.",
                  file=sys.stderr)
        self.deliver(result, raw=raw, copy=copy, wait=False)
        return result

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def deliver(self, result: ComposedPrompt, raw: bool = False,
                copy: Optional[bool] = None, wait: Optional[bool] = None):
        """Print the prompt, copy it if enabled, then optionally pause."""
        if raw:
            safe_print(result.text)
        else:
            template = OutputTemplate(symbols=self.symbols)
            template.header("PRIMER", "Composed Prompt")
            template.section("FRAGMENTS", format_selected(result.selection, self.symbols))
            template.section("PROMPT", result.text)
            template.footer(f"{len(result.selection)} fragment(s) | {len(result.text)} chars")
            safe_print(template.render())

        if copy is None:
            copy = self.config.output.clipboard
        if copy:
            copied, message = copy_to_clipboard(result.text)
            marker = self.symbols.check_pass if copied else self.symbols.info
            print(f"{marker} {message}", file=sys.stderr if raw else sys.stdout)

        if wait is None:
            wait = self.config.output.wait_for_key
        if wait and sys.stdin.isatty():
            try:
                input("Press Enter to exit...")
            except EOFError:
                pass


def parse_project_pairs(pairs: Optional[List[str]]) -> Dict[str, str]:
    """
    Parse repeated FIELD=TEXT flags into a dict.

    Raises:
        ValueError: On a missing '=' or an unknown field name
    """
    values: Dict[str, str] = {}
    for pair in pairs or []:
        key, sep, text = pair.partition("=")
        key = key.strip().lower()
        if not sep:
            raise ValueError(f"Expected FIELD=TEXT, got '{pair}'")
        if key not in PROJECT_FIELD_KEYS:
            raise ValueError(f"Unknown project field '{key}'. Valid: {', '.join(PROJECT_FIELD_KEYS)}")
        values[key] = text
    return values


def register_parser(subparsers):
    """Register compose command parser."""
    p = subparsers.add_parser('compose', help='Build a prompt (interactive unless --type is given)')
    p.add_argument('--type', '-t', dest='work_type', choices=work_type_keys(),
                   help='Work type; skips the menus')
    p.add_argument('--tech', action='store_true',
                   help='With --type: include tech stack context')
    p.add_argument('--context', '-c', action='append', dest='contexts',
                   choices=list(OPTIONAL_CONTEXTS),
                   help='With --type: additional context (repeatable)')
    p.add_argument('--project', action='append', dest='project', metavar='FIELD=TEXT',
                   help=f"With --type and --tech: project detail ({', '.join(PROJECT_FIELD_KEYS)})")
    p.add_argument('--include', '-i', action='append', dest='include',
                   choices=list(CUSTOM_CHOICES),
                   help='With --type custom: fragment to include (repeatable)')
    p.add_argument('--question', '-q', default="",
                   help='Question appended after the fragments')
    p.add_argument('--raw', action='store_true',
                   help='Print only the prompt text')
    p.add_argument('--no-copy', action='store_true',
                   help='Do not copy the prompt to the clipboard')
    p.add_argument('--no-wait', action='store_true',
                   help='Do not wait for Enter before exiting')
    return p


def handle(cli, args):
    """Handle compose command dispatch."""
    copy = False if args.no_copy else None
    if not args.work_type:
        wait = False if args.no_wait else None
        return cli._compose_cmd.interactive(raw=args.raw, copy=copy, wait=wait)

    try:
        project = parse_project_pairs(args.project)
    except ValueError as e:
        print(f"Error: {e}")
        return None

    return cli._compose_cmd.from_answers(
        args.work_type,
        tech=args.tech,
        contexts=args.contexts,
        project=project,
        include=args.include,
        question=args.question,
        raw=args.raw,
        copy=copy,
    )

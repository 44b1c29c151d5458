"""CLI command for browsing dictionary entries interactively."""

from collections.abc import Callable

from lexiview.cli.commands.common import create_session, load_config
from lexiview.exceptions import LexiviewException
from lexiview.orchestration import LookupSession
from lexiview.presenters import ConsolePresenter

HELP_TEXT = """Commands:
  <n>       follow link [n]
  b         go back
  f         go forward
  s WORD    look up WORD (a bare word works too)
  q         quit"""


def browse_command(args, input_func: Callable[[str], str] | None = None) -> int:
    """Execute the browse subcommand.

    Args:
        args: Parsed command-line arguments
        input_func: Source of command lines (defaults to input())

    Returns:
        Exit code (always 0; errors are reported and browsing continues)
    """
    config = load_config(args)
    presenter = ConsolePresenter()
    session = create_session(config, presenter)
    return run_browser(session, presenter, input_func or input, first_word=args.word)


def run_browser(
    session: LookupSession,
    presenter: ConsolePresenter,
    input_func: Callable[[str], str],
    first_word: str | None = None,
) -> int:
    """Run the interactive loop until the user quits or input ends.

    Args:
        session: Session bound to the presenter
        presenter: Console presenter that numbers links
        input_func: Source of command lines
        first_word: Optional word to look up before prompting

    Returns:
        Exit code
    """
    presenter.show_info(HELP_TEXT)
    if first_word:
        _run(presenter, lambda: session.search(first_word))

    while True:
        try:
            line = input_func("> ").strip()
        except (EOFError, KeyboardInterrupt):
            return 0

        if not line:
            continue

        command, _, rest = line.partition(" ")
        if command in ("q", "quit"):
            return 0
        elif command in ("h", "?", "help"):
            presenter.show_info(HELP_TEXT)
        elif command == "b":
            _run(presenter, session.go_back)
        elif command == "f":
            _run(presenter, session.go_forward)
        elif command == "s":
            _run(presenter, lambda: session.search(rest))
        elif line.isdigit():
            target = presenter.link_at(int(line))
            if target is None:
                presenter.show_error(f"No link [{line}]")
            else:
                _run(presenter, lambda: session.follow(target))
        else:
            _run(presenter, lambda: session.search(line))


def _run(presenter: ConsolePresenter, action: Callable[[], object]) -> None:
    """Run one navigation action, reporting errors without stopping the loop."""
    try:
        action()
    except LexiviewException as e:
        presenter.show_error(str(e))

"""CLI command for printing the entry of a single word."""

from lexiview.cli.commands.common import create_session, load_config
from lexiview.exceptions import LexiviewException
from lexiview.presenters import ConsolePresenter


def define_command(args) -> int:
    """Execute the define subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = load_config(args)
    presenter = ConsolePresenter(show_link_numbers=False)
    session = create_session(config, presenter)

    try:
        entry = session.search(args.word)
    except LexiviewException as e:
        presenter.show_error(str(e))
        return 1

    if entry is None or not entry.language_groups:
        presenter.show_info(f"No definitions shown for '{args.word}'")
        return 1
    return 0

"""
Terminal front end for Diario.

A single-state menu loop: show the menu, read one line, run the command,
repeat until the user picks exit.
"""

import logging
import sys
from enum import Enum
from typing import Callable, TextIO

from diario.errors import InputChannelClosed, InputChannelError
from diario.store import NoteStore

logger = logging.getLogger(__name__)

# ESC c: full terminal reset
CLEAR_SCREEN = "\x1bc"

BANNER = "\n********* SEU DIÁRIO *********\n"

MENU_TITLE = "\nEscolha uma opção:\n"

MENU_OPTIONS = """
1 - Adicionar uma nota ao seu Diário
2 - Ver o seu Diário
3 - Sair
"""

NOTE_PROMPT = "\nDigite uma nota que deseja adicionar ao seu Diario:\n"

NOTES_HEADER = "\nO seu diario contém:\n\n"

INVALID_MESSAGE = "\nO comando digitado é inválido!\n"


class Command(Enum):
    """What a menu line asks for."""

    INSERT = "1"
    READ = "2"
    EXIT = "3"
    INVALID = None


def classify(raw: str) -> Command:
    """Map a menu line to a Command. Surrounding whitespace is ignored."""
    choice = raw.strip()
    for command in (Command.INSERT, Command.READ, Command.EXIT):
        if choice == command.value:
            return command
    return Command.INVALID


class Terminal:
    """Line-oriented console over a pair of text streams."""

    def __init__(self, input: TextIO | None = None, output: TextIO | None = None):
        self.input = input if input is not None else sys.stdin
        self.output = output if output is not None else sys.stdout

    def print(self, message: str) -> None:
        self.output.write(message)
        self.output.flush()

    def read_line(self) -> str:
        """
        Read one line exactly as entered, terminator included.

        Raises:
            InputChannelClosed: The input stream hit end-of-file
            InputChannelError: The input could not be decoded or read
        """
        try:
            line = self.input.readline()
        except UnicodeDecodeError as e:
            raise InputChannelError(f"not valid {e.encoding} ({e.reason})") from e
        except OSError as e:
            raise InputChannelError(e.strerror or str(e)) from e
        if line == "":
            raise InputChannelClosed()
        return line

    def clear(self) -> None:
        self.print(CLEAR_SCREEN)

    def banner(self) -> None:
        self.print(BANNER)

    def menu(self) -> str:
        """Show the options and return the raw line the user typed."""
        self.print(MENU_TITLE)
        self.print(MENU_OPTIONS)
        return self.read_line()

    def ask_note(self) -> str:
        self.print(NOTE_PROMPT)
        return self.read_line()

    def show_notes(self, notes: str) -> None:
        self.print(NOTES_HEADER)
        self.print(notes)

    def invalid(self) -> None:
        self.print(INVALID_MESSAGE)


class InteractionLoop:
    """
    Drives the journal menu.

    There is one state, "awaiting command". Each command maps to a handler in
    a fixed table; a handler returns False to stop the loop.
    """

    def __init__(self, store: NoteStore, terminal: Terminal, clear_screen: bool = True):
        self.store = store
        self.terminal = terminal
        self.clear_screen = clear_screen
        self.transitions: dict[Command, Callable[[], bool]] = {
            Command.INSERT: self._insert,
            Command.READ: self._read,
            Command.EXIT: self._exit,
            Command.INVALID: self._invalid,
        }

    def _clear(self) -> None:
        if self.clear_screen:
            self.terminal.clear()

    def _insert(self) -> bool:
        note = self.terminal.ask_note()
        self.store.append(note)
        self._clear()
        return True

    def _read(self) -> bool:
        self._clear()
        self.terminal.show_notes(self.store.read_all())
        return True

    def _exit(self) -> bool:
        return False

    def _invalid(self) -> bool:
        self._clear()
        self.terminal.invalid()
        return True

    def step(self) -> bool:
        """Run one menu round. Returns False once the user has chosen exit."""
        self.terminal.banner()
        command = classify(self.terminal.menu())
        logger.debug(f"Dispatching {command.name}")
        return self.transitions[command]()

    def run(self) -> None:
        """
        Loop until exit.

        Storage and console failures are not handled here; they end the
        session. End of input counts as a failure, not as exit.
        """
        while self.step():
            pass
        logger.info("Exit chosen, leaving journal")

import enum
import logging
import os
import subprocess
import sys
from typing import Callable, TextIO

from letterboxed.box import BoxLayout
from letterboxed.ranking import DISPLAY_LIMIT
from letterboxed.solver import InvalidLetterError, words_starting_with_letter
from letterboxed.trie import Trie

logger = logging.getLogger("letterboxed")

CLI_NAME = "letterboxed"


class Command(enum.Enum):
    HELP = "help"
    CLEAR = "clear"
    EXIT = "exit"
    TRIE = "trie"


def clean_input(text: str) -> str:
    return text.strip().lower()


class Shell:
    """Interactive prompt over a loaded dictionary and box.

    In normal mode a single letter lists the box-valid words starting with it.
    In trie mode every input is a step of dictionary exploration.
    """

    def __init__(
        self,
        trie: Trie,
        box: BoxLayout,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        limit: int = DISPLAY_LIMIT,
    ):
        self.trie = trie
        self.box = box
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.limit = limit
        self.trie_mode = False
        self.prefix = ""
        self.running = True
        self.commands: dict[Command, Callable[[], None]] = {
            Command.HELP: self.display_help,
            Command.CLEAR: self.clear_screen,
            Command.EXIT: self.exit,
            Command.TRIE: self.toggle_trie_mode,
        }

    def print(self, *args):
        print(*args, file=self.stdout)

    def prompt(self) -> str:
        return ("trie" if self.trie_mode else CLI_NAME) + "> "

    # --- commands

    def display_help(self):
        self.print(f"Welcome to {CLI_NAME}! These are the available commands: ")
        self.print("help    - Show available commands")
        self.print("clear   - Clear the terminal screen")
        self.print("trie    - Toggle dictionary exploration mode")
        self.print("exit    - Closes your connection")

    def clear_screen(self):
        cmd = "cls" if os.name == "nt" else "clear"
        try:
            subprocess.run([cmd], stdout=self.stdout, check=True)
        except (OSError, subprocess.CalledProcessError) as e:
            self.print(e)

    def exit(self):
        self.running = False

    def toggle_trie_mode(self):
        self.trie_mode = not self.trie_mode
        if self.trie_mode:
            self.print("Trie mode activated")

    # --- queries

    def query_letter(self, text: str):
        try:
            words = words_starting_with_letter(self.trie, self.box, text.upper())
        except InvalidLetterError as e:
            self.print(f"Error: {e}")
            return
        shown = words[: self.limit]
        self.print(f"There are {len(words)} valid words starting with '{text}': {shown}")

    def explore(self, text: str):
        result = self.trie.explore(text, self.prefix)
        self.prefix = result.prefix
        if result.error:
            self.print(f"Error: {result.error}")
        elif result.reset and result.words:
            self.print(f"Word: {result.words[0]} has no more children. Starting over.")
        elif result.children:
            self.print(
                f" - Chars so far: {result.prefix}\n"
                f" - Children: {result.children}\n"
                f" - Valid words: {result.words}"
            )
        elif not result.reset:
            self.print(f"There are {result.total} valid words. Here are the first {len(result.words)}: {result.words}")

    def handle(self, line: str):
        text = clean_input(line)
        try:
            command = Command(text)
        except ValueError:
            command = None

        if command is not None:
            self.commands[command]()
        elif self.trie_mode:
            self.explore(text)
        elif len(text) == 1:
            self.query_letter(text)
        elif text:
            logger.debug("Ignoring input %r", text)

    def run(self):
        while self.running:
            self.stdout.write(self.prompt())
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                # EOF
                self.print()
                break
            self.handle(line)

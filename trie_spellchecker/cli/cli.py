"""
cli.py - interactive spell checker
Features:
- Loads the dictionary into the Trie and reports word/node counts and load time
- Prompts for one word at a time, '-1' (configurable) to quit
- Prints corrections with microsecond timing, or "No Suggestions"
- /stats, /config and /set commands
- --generate / --verify modes for random-misspelling runs
- Uses Rich for tables and formatting
"""

import argparse
import sys
from typing import List, Optional, TextIO

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich import box

from trie_spellchecker.core.generator import generate, write_generated
from trie_spellchecker.core.loader import DictionaryLoadError, read_words
from trie_spellchecker.core.normalizer import is_valid_input
from trie_spellchecker.core.spellchecker import CorrectionResult, SpellChecker
from trie_spellchecker.tools.verify import run_verification
from trie_spellchecker.utils.config_manager import Config
from trie_spellchecker.utils.logger_utils import Log
from trie_spellchecker.utils.metrics_tracker import Metrics

INVALID_MSG = "Invalid input! Please try again with a word containing only [a-z]."


class WordPrompt(Prompt):
    """Prompt that raises EOFError when a piped stream runs dry (plain input() already does)."""

    prompt_suffix = " "

    @classmethod
    def get_input(cls, console, prompt, password, stream=None):
        if stream is None:
            return super().get_input(console, prompt, password, stream=stream)
        if prompt:
            console.print(prompt, end="")
        line = stream.readline()
        if not line:
            raise EOFError
        return line


class CLI:
    """Command-line interface: reads words, prints corrections, handles slash commands."""

    def __init__(
        self,
        checker: SpellChecker,
        cfg: Optional[Config] = None,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
    ):
        self.checker = checker
        self.cfg = cfg or Config()
        self.console = console or Console(highlight=False)
        self.stream = stream  # None reads the terminal
        self.running = True

    def run(self):
        """
        Main interactive loop:
        - Prompts the user for a word.
        - Handles the sentinel and slash commands.
        - Validates and corrects everything else.
        """
        self.console.rule("[bold magenta]Spell Checker[/bold magenta]")
        self.console.print("Welcome to the Spell Checker.")
        if self.checker.load_stats is not None:
            self.console.print(self.checker.load_stats.summary() + "\n")

        sentinel = str(self.cfg.get("sentinel", "-1"))
        while self.running:
            try:
                raw = WordPrompt.ask(
                    f"Enter a word ('{sentinel}' to quit):\n >",
                    console=self.console,
                    default="",
                    show_default=False,
                    stream=self.stream,
                )
            except (EOFError, KeyboardInterrupt):
                break
            word = raw.strip()
            if not word:
                continue
            if word == sentinel:
                break
            if word.startswith("/"):
                self._handle_command(word)
                continue
            self.process(word)
        self._exit()

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, cmd: str):
        if cmd == "/quit":
            self.running = False
            return

        if cmd == "/stats":
            self._show_stats()
            return

        if cmd == "/config":
            self._show_config()
            return

        if cmd == "/set" or cmd.startswith("/set "):
            self._set_option(cmd[len("/set"):].strip())
            return

        self.console.print(f"[red]Unknown command:[/red] {cmd}")

    # CORE INPUT PROCESSING ---------------------------------------------------------------
    def process(self, word: str) -> Optional[CorrectionResult]:
        """Validate -> correct -> display. Returns None for rejected input."""
        if not is_valid_input(word):
            self.console.print(INVALID_MSG, markup=False)
            return None
        res = self.checker.check(word)
        self._display(res)
        return res

    # DISPLAY -------------------------------------------------------------------------------
    def _display(self, res: CorrectionResult):
        if not res.found:
            self.console.print("No Suggestions")
            return
        shown = list(res.corrections)
        limit = int(self.cfg.get("max_suggestions", 0) or 0)
        if limit > 0:
            shown = shown[:limit]
        if self.cfg.get("show_timings", True):
            self.console.print(
                f"{len(res.corrections)} possible correction(s) found in "
                f"{int(res.elapsed_us)} microsecond(s)."
            )
        self.console.print("Suggestion(s): " + " ".join(shown), style="green" if res.exact else None)

    def _show_stats(self):
        table = Table(title="Session Stats", box=box.SIMPLE)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        for k, v in self.checker.stats().items():
            table.add_row(k, str(v))
        self.console.print(table)

    def _show_config(self):
        lines = "\n".join(f"{k:17} = {v}" for k, v in self.cfg.data.items())
        self.console.print(Panel(lines, title="Config", border_style="cyan"))

    def _set_option(self, args: str):
        """/set key value -> cast and save through Config."""
        key, _, val = args.partition(" ")
        if not key or not val.strip():
            self.console.print("[red]Usage:[/red] /set <option> <value>")
            return
        try:
            ok = self.cfg.set(key, val.strip())
        except ValueError as e:
            self.console.print(f"[red]Bad value for {key}:[/red] {e}")
            return
        if not ok:
            self.console.print(f"No such option: {key}", markup=False)
            return
        self.console.print(f"{key} = {self.cfg[key]}", markup=False)

    # EXIT ------------------------------------------------------------------------
    def _exit(self):
        self.running = False
        self.checker.metrics.save()
        self.checker.log_stats()
        self.console.print("Terminating program execution...")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="trie-spellchecker", description="Trie based spell checker")
    p.add_argument("--dict", dest="dictionary", default=None, help="word list (default from config)")
    p.add_argument("--config", default=None, help="JSON config file")
    p.add_argument("--no-timings", action="store_true", help="hide microsecond timings")
    p.add_argument("--seed", type=int, default=None, help="seed for --generate/--verify")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--generate", type=int, nargs="?", const=0, metavar="N", help="write N random misspellings and exit")
    mode.add_argument("--verify", type=int, nargs="?", const=0, metavar="N", help="check N random misspellings and report")
    p.add_argument("--out", default="wordsgenerated.txt", help="output file for --generate")
    return p


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None, stream: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console(highlight=False)
    cfg = Config(args.config)
    if args.config:
        Log.set_path(cfg.get("log_path") or Log.path)
    if args.no_timings:
        cfg.data["show_timings"] = False
    path = args.dictionary or cfg.get("dictionary_path")
    seed = args.seed if args.seed is not None else cfg.get("generator_seed")

    try:
        if args.generate is not None:
            words = generate(read_words(path), count=args.generate or cfg["generator_count"], seed=seed)
            write_generated(args.out, words)
            for w in words:
                console.print(w)
            console.print(cfg.get("sentinel", "-1"))
            return 0
        checker = SpellChecker.from_file(path, metrics=Metrics(cfg.get("metrics_path")))
    except DictionaryLoadError as e:
        Log.error(str(e))
        console.print(f"[red]{e}[/red]")
        console.print("[red]Aborting program execution due to catastrophic failure...[/red]")
        return 1

    if args.verify is not None:
        report = run_verification(checker, count=args.verify or cfg["generator_count"], seed=seed)
        console.print(report.summary())
        return 0

    CLI(checker, cfg=cfg, console=console, stream=stream).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Main entry point for running a parking lot command session."""

import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from lot.parking_lot import ParkingLot

from .commands.command_processor import CommandProcessor
from .config import LOG_FORMAT, RunnerConfig


class CommandRunner:
    """Feeds command lines to a processor and prints each rendered result."""

    def __init__(
        self,
        config: RunnerConfig | None = None,
        lot: ParkingLot | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.config = config or RunnerConfig()
        self.output = output or sys.stdout

        # Diagnostics go to stderr; stdout carries command results
        logging.basicConfig(
            level=getattr(logging, self.config.log_level),
            format=LOG_FORMAT,
            handlers=[
                logging.StreamHandler(sys.stderr),
            ],
        )
        self.logger = logging.getLogger(__name__)

        self.lot = lot or ParkingLot()
        self.processor = CommandProcessor(lot=self.lot, logger=self.logger)

    def run_lines(self, lines: Iterable[str]) -> list[str]:
        """Execute every line in order and return the rendered results."""
        rendered: list[str] = []
        for raw in lines:
            line = raw.removesuffix("\n").removesuffix("\r")
            if self.config.echo_commands:
                self.output.write(f"\ncommand: '{line}'\n")
            text = self.processor.execute(line).render()
            self.output.write(text + "\n")
            rendered.append(text)
        return rendered

    def run_file(self) -> list[str]:
        """Execute every command in the configured input file."""
        if self.config.input_path is None:
            raise ValueError("input_path is required for batch mode")
        self.logger.info(f"Running commands from {self.config.input_path}")
        # Only "\n" and "\r\n" end a command; other line separators stay in the line
        with self.config.input_path.open(encoding="utf-8", newline="") as handle:
            contents = handle.read()
        lines = contents.split("\n")
        if lines[-1] == "":
            lines.pop()
        return self.run_lines(lines)

    def run_interactive(self, stream: TextIO | None = None) -> None:
        """Read commands until end of input or Ctrl+C."""
        stream = stream or sys.stdin
        try:
            for line in stream:
                self.run_lines([line])
                self.output.flush()
        except KeyboardInterrupt:
            self.logger.info("Received keyboard interrupt")

    def start(self) -> None:
        if self.config.interactive:
            self.run_interactive()
        else:
            self.run_file()


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Parking lot command interpreter")
    parser.add_argument("input_file", nargs="?", help="File of commands (default: stdin)")
    parser.add_argument("--log-level", default="WARNING", help="Log level")
    parser.add_argument(
        "--no-echo",
        action="store_true",
        help="Do not print each command before its result in batch mode",
    )
    args = parser.parse_args(argv)

    config = RunnerConfig(
        input_path=args.input_file,
        log_level=args.log_level,
        echo_commands=False if args.no_echo else None,
    )
    runner = CommandRunner(config=config)

    try:
        runner.start()
    except OSError as e:
        logging.error(f"Cannot read commands: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

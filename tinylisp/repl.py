"""Line-oriented read-eval-print loop."""

from __future__ import annotations

import logging
import sys
from contextlib import redirect_stdout
from typing import TextIO

from tinylisp import config
from tinylisp.interpreter import Interpreter
from tinylisp.types.errors import LispError

logger = logging.getLogger(__name__)

BANNER = "Simple LISP Interpreter\nType 'exit' to quit."
EXIT_COMMAND = "exit"


def repl(
    interp: Interpreter | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    prompt: str | None = None,
) -> Interpreter:
    """Run the loop until `exit` or end of input; returns the interpreter used.

    Every line is read and evaluated on its own. A LispError is reported and
    the loop moves on to the next line.
    """
    interp = interp if interp is not None else Interpreter()
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    prompt = prompt if prompt is not None else config.get_prompt()

    print(BANNER, file=stdout)
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        line = line.strip()
        if line == EXIT_COMMAND:
            break
        if not line:
            continue
        try:
            # output of the print primitive shares the result stream
            with redirect_stdout(stdout):
                result = interp.eval_to_string(line)
        except LispError as ex:
            logger.info("%s: %s", type(ex).__name__, ex)
            print(f"Error: {ex}", file=stdout)
            continue
        print(result, file=stdout)
    return interp


def main() -> None:
    logging.basicConfig(level=config.get_log_level())
    repl()


if __name__ == "__main__":
    main()

"""Interactive REPL for go-forth.

Reads lines, evaluates them against one engine, and reports the stack after
every line. Errors are reported and the loop carries on, `bye` ends it.
"""

__all__ = ["ReplContext", "format_stack", "format_error", "repl", "run_lines", "main"]

import sys

import goforth


PROMPT = "go-forth> "


class ReplContext:
    """Context for a REPL session.

    Maintains state across multiple evaluations:
    - the engine, with its stack and dictionary
    - whether `bye` has been seen
    - the console used for output when rich output is requested

    Args:
        stack_capacity: (int) Engine stack capacity
        dictionary_capacity: (int) Engine dictionary capacity
        use_rich: (bool) Style output with rich
    """

    def __init__(self, stack_capacity=goforth.STACK_CAPACITY,
                 dictionary_capacity=goforth.DICTIONARY_CAPACITY, use_rich=False):
        self.console = None
        if use_rich:
            import rich.console
            self.console = rich.console.Console(highlight=False)
        self.engine = goforth.Engine(stack_capacity, dictionary_capacity, output=self.write)
        self.running = True
        self.errors = 0

    def write(self, text, style=None):
        """Print one line of output, styled when rich is enabled."""
        if self.console is not None:
            self.console.print(text, style=style, markup=False)
        else:
            print(text)

    def eval_line(self, line):
        """Evaluate a single line of input and report the outcome.

        Returns the engine Status, or None when the line failed.
        """
        try:
            status = self.engine.eval(line)
        except goforth.ForthError as err:
            self.errors += 1
            self.write(format_error(err), style="bold red")
            return None

        if status is goforth.status_shutdown:
            self.write("OK: Shutting down...", style="bold")
            self.running = False
        elif status is goforth.status_yielding:
            self.write("Doing a yield.", style="yellow")
        else:
            self.write(f"OK -> STACK {format_stack(self.engine.stack)}", style="green")
        return status


def format_stack(stack):
    """Format stack contents bottom first, like `[1, 2, 3]`."""
    return "[" + ", ".join(str(value) for value in stack) + "]"


def format_error(err):
    """Format a ForthError for display."""
    text = f"ERROR: {err.kind}: {err.message}"
    if err.token is not None:
        text += f" (at {err.token!r}"
        if err.column is not None:
            text += f", column {err.column}"
        text += ")"
    return text


def run_lines(context, lines):
    """Evaluate lines in order until they run out or `bye` is seen.

    Returns:
        (int) Process exit code, 1 if any line failed
    """
    for line in lines:
        context.eval_line(line)
        if not context.running:
            break
    return 1 if context.errors else 0


def repl(context=None):
    """Run the interactive REPL."""
    if context is None:
        context = ReplContext()

    while context.running:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            break
        context.eval_line(line)


def main():
    """Main entry point for REPL."""
    try:
        repl()
    except KeyboardInterrupt:
        print()
        sys.exit(0)


if __name__ == "__main__":
    main()

"""Player interface for human (text input) or AI controllers."""


QUIT = "quit"


class Player:
    def __init__(self, mark):
        self.mark = mark

    def next_move(self, session):
        """Return (row, col) for the next move, or QUIT."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, mark, input_fn=None, output_fn=None):
        super().__init__(mark)
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

    def next_move(self, session):
        """Text-input player; 'h' prints a hint, 'q' quits. Re-prompts on malformed input."""
        prompt = "Enter move as 'row col' (0-indexed), 'h' for hint, 'q' to quit: "
        while True:
            raw = self.input_fn(prompt).strip().lower()
            if raw in ("q", "quit"):
                return QUIT
            if raw in ("h", "hint"):
                self.output_fn(f"Hint: {session.hint()}")
                continue
            try:
                row_str, col_str = raw.split()
                return int(row_str), int(col_str)
            except ValueError:
                self.output_fn("Invalid input format; expected two integers")


"""Markdown logger for gameplay events (shots, start/pause/reset)."""

import datetime


class GameLogger:
    """Handles logging of game events to markdown file."""

    def __init__(self, log_file: str):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.setup_log()

    @staticmethod
    def _timestamp() -> str:
        return datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Zombie Shooter Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Events\n\n")
                f.write("| Timestamp | Position (x,y) | Result | Details |\n")
                f.write("|-----------|---------------|--------|----------|\n")
        except Exception as e:
            print(f"Failed to initialize log file: {e}")

    def _append(self, row: str) -> None:
        try:
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(row)
        except Exception as e:
            print(f"Failed to write log entry: {e}")

    def log_click(self, pos: tuple[float, float], hit: bool, details: str = "") -> None:
        """
        Log a shot.

        Parameters
        ----------
        pos : tuple[float, float]
            Click position in canvas coordinates
        hit : bool
            Whether the shot hit an enemy
        details : str, optional
            Additional details about the shot
        """
        result = "HIT" if hit else "MISS"
        self._append(f"| {self._timestamp()} | ({pos[0]:.0f}, {pos[1]:.0f}) | {result} | {details} |\n")

    def log_state(self, event: str, details: str = "") -> None:
        """Log a game state transition such as START, PAUSE or RESET."""
        self._append(f"| {self._timestamp()} | {event} | SYSTEM | {details} |\n")

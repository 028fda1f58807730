"""Interactive user prompts."""

from pathlib import Path
from typing import Optional

from retag.models import EditResult, TagRequest, TrackTags


class InteractivePrompts:
    """Collects the file, tags and output path from the console."""

    COLORS = {
        "reset": "\033[0m",
        "bold": "\033[1m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "red": "\033[91m",
        "cyan": "\033[96m",
        "dim": "\033[2m",
    }

    def __init__(self, no_color: bool = False, quiet: bool = False):
        """
        Initialize interactive prompts.

        Args:
            no_color: Disable colored output
            quiet: Suppress non-essential output
        """
        self.no_color = no_color
        self.quiet = quiet

        if no_color:
            self.COLORS = {k: "" for k in self.COLORS}

    def _c(self, color: str, text: str) -> str:
        """Apply color to text."""
        return f"{self.COLORS.get(color, '')}{text}{self.COLORS['reset']}"

    def print(self, *args, **kwargs):
        """Print unless quiet mode."""
        if not self.quiet:
            print(*args, **kwargs)

    def ask(self, label: str) -> str:
        """Prompt for a single line and return it stripped."""
        return input(f"{self._c('bold', label)}: ").strip()

    def ask_source_path(self) -> str:
        """Prompt until the user names an existing file."""
        while True:
            value = self.ask("Music file path")
            if not value:
                print(self._c("red", "File path cannot be empty"))
                continue
            if Path(value).exists():
                return value
            print(self._c("red", "File not found, try again"))

    def ask_cover_path(self) -> Optional[str]:
        """Prompt for an optional cover image. Empty skips."""
        while True:
            value = self.ask("Cover image path (leave empty to skip)")
            if not value:
                return None
            if Path(value).is_file():
                return value
            print(self._c("red", "Cover image not found, try again (or leave empty)"))

    def collect_request(self) -> TagRequest:
        """Prompt for title, artist, album and cover."""
        title = self.ask("Track title")
        artist = self.ask("Artist name")
        album = self.ask("Album name")
        cover = self.ask_cover_path()
        return TagRequest(title=title, artist=artist, album=album, cover=cover)

    def ask_output_path(self) -> Optional[str]:
        """Prompt for the output path. Empty means the default next to the source."""
        value = self.ask("Output path (leave empty to save next to original file)")
        return value or None

    def show_tag_comparison(self, file_path: str, current: TrackTags,
                            request: TagRequest) -> None:
        """Display current vs requested tags for a file."""
        self.print(f"\n{self._c('bold', 'File:')} {Path(file_path).name}")
        self.print("-" * 60)

        fields = [
            ("Title", current.title, request.title),
            ("Artist", current.artist, request.artist),
            ("Album", current.album, request.album),
        ]

        self.print(f"{'Field':<10} {'Current':<24} {'New':<24}")
        self.print(f"{'=' * 10} {'=' * 24} {'=' * 24}")

        for field, curr, new in fields:
            curr_str = str(curr) if curr else self._c("dim", "(empty)")
            if not new:
                new_str = self._c("dim", "(unchanged)")
            elif new != curr:
                new_str = self._c("green", new)
            else:
                new_str = new
            self.print(f"{field:<10} {curr_str:<24} {new_str:<24}")

        covers = f"{current.cover_count} embedded"
        if request.cover:
            covers += f", adding {Path(request.cover).name}"
        self.print(f"{'Cover':<10} {covers}")

    def show_unsupported(self, extension: str) -> None:
        """Report that a file type has no tag handler."""
        print(self._c("yellow", f"Unsupported file type: {extension}"))

    def show_result(self, result: EditResult) -> None:
        """Report where the output was saved."""
        print(f"{self._c('green', 'Saved to:')} {result.output}")

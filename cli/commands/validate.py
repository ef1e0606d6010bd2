"""
Validate command - check YM5 file structure and header consistency.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from ym5view.formats.ym5.container import YM5File, YM5Offsets
from ym5view.models.song import SongAttributes
from ym5view.utils.validation import (
    YM5Error,
    BadHeaderError,
    MetadataError,
    RegisterTableError,
)

console = Console()
app = typer.Typer()

EXPECTED_END_MARKER = b"End!"


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: str  # "error", "warning", "info"
    area: str
    offset: int
    message: str


@dataclass
class ValidationResult:
    """Result of validating a YM5 file."""

    filepath: str
    valid: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    info: List[ValidationIssue] = field(default_factory=list)

    @property
    def total_issues(self) -> int:
        return len(self.errors) + len(self.warnings) + len(self.info)


class YM5Validator:
    """
    Validate YM5 structure, then check header fields for consistency.

    Structural problems are errors (the file cannot be decoded). Header
    values the decoder does not depend on only produce warnings.
    """

    def __init__(self, data: bytes, filepath: str):
        self.data = data
        self.filepath = filepath
        self.issues: List[ValidationIssue] = []
        self.ym: Optional[YM5File] = None

    def validate(self) -> ValidationResult:
        """Perform full validation and return result."""
        self.issues = []

        self._validate_structure()
        if self.ym is not None:
            self._validate_frame_count()
            self._validate_loop()
            self._validate_frequencies()
            self._validate_attributes()
            self._validate_end_marker()

        errors = [i for i in self.issues if i.severity == "error"]
        warnings = [i for i in self.issues if i.severity == "warning"]
        info = [i for i in self.issues if i.severity == "info"]

        return ValidationResult(
            filepath=self.filepath,
            valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            info=info,
        )

    def _add_issue(self, severity: str, area: str, offset: int, message: str) -> None:
        """Add a validation issue."""
        self.issues.append(ValidationIssue(severity, area, offset, message))

    def _validate_structure(self) -> None:
        """Run the container parser and map its errors to issues."""
        try:
            self.ym = YM5File(self.data)
        except BadHeaderError as e:
            self._add_issue("error", "Header", 0, str(e))
            return
        except MetadataError as e:
            self._add_issue("error", "Metadata", YM5Offsets.METADATA_START, str(e))
            return
        except RegisterTableError as e:
            self._add_issue("error", "Registers", YM5Offsets.METADATA_START, str(e))
            return
        except YM5Error as e:
            self._add_issue("error", "Structure", 0, str(e))
            return

        self._add_issue("info", "Header", 0, "Signature and check string are valid")
        self._add_issue(
            "info",
            "Registers",
            self.ym.registers_offset,
            f"{self.ym.num_registers()} frames of 28 bytes",
        )

    def _validate_frame_count(self) -> None:
        if self.ym.num_vbl() != self.ym.num_registers():
            self._add_issue(
                "warning",
                "Num VBL",
                YM5Offsets.NUM_VBL,
                f"Header declares {self.ym.num_vbl()} VBLs, "
                f"register table holds {self.ym.num_registers()}",
            )

    def _validate_loop(self) -> None:
        loop = self.ym.vbl_loop_number()
        if self.ym.num_registers() and loop >= self.ym.num_registers():
            self._add_issue(
                "warning",
                "Loop",
                YM5Offsets.VBL_LOOP_NUMBER,
                f"Loop frame {loop} is past the last frame ({self.ym.num_registers() - 1})",
            )

    def _validate_frequencies(self) -> None:
        if self.ym.external_frequency() == 0:
            self._add_issue(
                "warning",
                "Frequency",
                YM5Offsets.EXTERNAL_FREQUENCY,
                "External frequency is 0, tone frequencies cannot be computed",
            )
        if self.ym.player_frequency() == 0:
            self._add_issue(
                "warning", "Frequency", YM5Offsets.PLAYER_FREQUENCY, "Player frequency is 0"
            )

    def _validate_attributes(self) -> None:
        if self.ym.attributes & SongAttributes.INTERLEAVED:
            self._add_issue(
                "warning",
                "Attributes",
                YM5Offsets.SONG_ATTRIBUTES,
                "Interleaved flag is set; frames are decoded as stored",
            )
        if self.ym.num_digi_drums():
            self._add_issue(
                "warning",
                "Digi-drums",
                YM5Offsets.NUM_DIGI_DRUMS,
                f"{self.ym.num_digi_drums()} digi-drums declared; samples are not decoded",
            )

    def _validate_end_marker(self) -> None:
        marker = self.ym.end_marker
        if marker != EXPECTED_END_MARKER:
            self._add_issue(
                "info",
                "End Marker",
                len(self.data) - YM5Offsets.LOOP_MARKER_SIZE,
                f"End marker is {marker!r}, expected {EXPECTED_END_MARKER!r}",
            )


def display_validation(result: ValidationResult) -> None:
    """Display validation result with Rich formatting."""
    if result.valid:
        status = "[bold green]VALID[/bold green]"
        border = "green"
    else:
        status = "[bold red]INVALID[/bold red]"
        border = "red"

    console.print(
        Panel(
            f"[bold]File:[/bold] {result.filepath}\n"
            f"[bold]Status:[/bold] {status}\n\n"
            f"Errors: [red]{len(result.errors)}[/red]  "
            f"Warnings: [yellow]{len(result.warnings)}[/yellow]  "
            f"Info: [blue]{len(result.info)}[/blue]",
            title="[bold]Validation Result[/bold]",
            border_style=border,
        )
    )

    if result.errors or result.warnings:
        table = Table(title="Issues", box=box.ROUNDED, show_header=True, header_style="bold cyan")
        table.add_column("Severity", width=10)
        table.add_column("Area", style="cyan", width=12)
        table.add_column("Offset", style="dim", width=8)
        table.add_column("Message", width=50)

        for issue in result.errors:
            table.add_row("[red]ERROR[/red]", issue.area, f"0x{issue.offset:02X}", issue.message)

        for issue in result.warnings:
            table.add_row(
                "[yellow]WARN[/yellow]", issue.area, f"0x{issue.offset:02X}", issue.message
            )

        console.print(table)

    if result.info:
        info_table = Table(title="Checks", box=box.SIMPLE, show_header=False)
        info_table.add_column("", width=70)

        for issue in result.info:
            info_table.add_row(f"[green]OK[/green] {issue.area}: {issue.message}")

        console.print(info_table)


@app.command()
def validate(
    file: Path = typer.Argument(..., help="YM5 file to validate"),
    strict: bool = typer.Option(False, "--strict", "-s", help="Treat warnings as errors"),
) -> None:
    """
    Validate a YM5 file structure and header fields.

    Checks for:

    - Valid signature and check string
    - Three metadata terminators
    - Register table made of whole 28-byte frames
    - Header frame count and loop point consistency
    - Non-zero clock and player frequencies

    Examples:

        ym5view validate song.ym

        ym5view validate song.ym --strict
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    with open(file, "rb") as f:
        data = f.read()

    validator = YM5Validator(data, str(file))
    result = validator.validate()

    if strict and result.warnings:
        result.valid = False

    display_validation(result)

    if not result.valid:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()

"""The board holds the marks and implements every rule that only depends on the cells (win / full board)."""

from dataclasses import dataclass, field
from typing import Optional, Self

from tictactoe.core.exceptions import InvalidMoveError
from tictactoe.core.shared_types import Mark

# Always 3x3, cells indexed 0-8 row-major.
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

WIN_PATTERNS: tuple[tuple[int, int, int], ...] = (
    # rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # diagonals
    (0, 4, 8),
    (2, 4, 6),
)

Cell = Optional[Mark]


def validate_index(index: int) -> int:
    # bool is an int subclass, but True/False are never meant as cell indexes
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidMoveError(f"Cell index must be an integer, got {index!r}.")
    if not 0 <= index < CELL_COUNT:
        raise InvalidMoveError(
            f"Cell index {index} is outside of the board (0-{CELL_COUNT - 1})."
        )
    return index


@dataclass
class Board:
    cells: list[Cell] = field(default_factory=lambda: [None] * CELL_COUNT)

    @classmethod
    def from_string(cls, layout: str) -> Self:
        """Build a board from a 9 character string, e.g. 'XO.X..O..' (anything but X/O is empty). Handy in tests."""
        if len(layout) != CELL_COUNT:
            raise InvalidMoveError(
                f"Board layout must have {CELL_COUNT} characters, got {len(layout)}."
            )
        cells: list[Cell] = [
            Mark(char) if char in (Mark.X, Mark.O) else None for char in layout
        ]
        return cls(cells)

    def cell(self, index: int) -> Cell:
        return self.cells[validate_index(index)]

    def is_empty(self, index: int) -> bool:
        return self.cell(index) is None

    def place(self, index: int, mark: Mark) -> None:
        """Put a mark on an empty cell. Marked cells are never overwritten."""
        if not self.is_empty(index):
            raise InvalidMoveError(f"Cell {index} is already taken by {self.cell(index)}.")
        self.cells[index] = mark

    def empty_cells(self) -> list[int]:
        return [index for index, cell in enumerate(self.cells) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def winner(self) -> Optional[Mark]:
        """Mark that owns a complete row, column or diagonal (None if there is no such line)."""
        for a, b, c in WIN_PATTERNS:
            if self.cells[a] is not None and self.cells[a] == self.cells[b] == self.cells[c]:
                return self.cells[a]
        return None

    def clear(self) -> None:
        self.cells = [None] * CELL_COUNT

    def render(self) -> str:
        """Text grid. Empty cells show their index so a terminal player knows what to type."""
        rows = []
        for row in range(BOARD_SIZE):
            indexes = range(row * BOARD_SIZE, (row + 1) * BOARD_SIZE)
            rows.append(
                " | ".join(
                    str(self.cells[i]) if self.cells[i] is not None else str(i)
                    for i in indexes
                )
            )
        return "\n---------\n".join(f" {row}" for row in rows)

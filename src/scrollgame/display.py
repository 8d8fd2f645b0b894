"""Rendering collaborator: draws the logical grid with pygame."""

from __future__ import annotations

from pathlib import Path
import logging
import pygame

from .grid import Grid, Occupant
from .settings import DisplaySettings
from .utils import BLACK, CYAN, LINE_COLOR, MAX_WINDOW_PIXELS, RED, YELLOW, Color

logger = logging.getLogger(__name__)


def cell_size_for(rows: int, cols: int) -> int:
    """Largest square cell that keeps the window within the pixel budget."""
    return max(min(MAX_WINDOW_PIXELS // rows, MAX_WINDOW_PIXELS // cols), 1)


def fit_image(image: pygame.Surface, cell_size: int) -> tuple[pygame.Surface, tuple[int, int]]:
    """Scale an image into a square cell keeping its aspect ratio, centered."""
    width, height = image.get_size()
    if width > height:
        draw_height = max(1, cell_size * height // width)
        scaled = pygame.transform.smoothscale(image, (cell_size, draw_height))
        return scaled, (0, (cell_size - draw_height) // 2)
    draw_width = max(1, cell_size * width // max(1, height))
    scaled = pygame.transform.smoothscale(image, (draw_width, cell_size))
    return scaled, ((cell_size - draw_width) // 2, 0)


def pixelate_image(path: Path, rows: int, cols: int) -> list[list[Color]]:
    """Sample an image into a rows x cols matrix of colors."""
    image = pygame.image.load(str(path))
    width, height = image.get_size()
    colors: list[list[Color]] = []
    for row in range(rows):
        line: list[Color] = []
        for col in range(cols):
            pixel = image.get_at((col * width // cols, row * height // rows))
            line.append((pixel.r, pixel.g, pixel.b))
        colors.append(line)
    return colors


def load_background(grid: Grid, path: Path) -> None:
    """Use an image, pixelated to the grid size, as the cell backgrounds."""
    grid.apply_colors(pixelate_image(path, grid.rows, grid.cols))


class PygameDisplay:
    """Window that mirrors grid cells and draws them on refresh."""

    def __init__(
        self,
        rows: int,
        cols: int,
        settings: DisplaySettings | None = None,
        root: Path | None = None,
    ) -> None:
        pygame.init()
        self.rows = rows
        self.cols = cols
        self.settings = settings or DisplaySettings()
        self.root = root or Path.cwd()
        self.cell_size = cell_size_for(rows, cols)
        self.screen = pygame.display.set_mode((self.cell_size * cols, self.cell_size * rows))
        self.title = "Grid"
        pygame.display.set_caption(self.title)

        self.colors: list[list[Color]] = [[BLACK] * cols for _ in range(rows)]
        self.occupants: list[list[Occupant]] = [[Occupant.EMPTY] * cols for _ in range(rows)]
        self.images: dict[Occupant, tuple[pygame.Surface, tuple[int, int]]] = {}
        self.load_assets()

    def load_assets(self) -> None:
        """Load occupant images, drawing placeholders for missing or broken files."""
        mapping = {
            Occupant.PLAYER: self.settings.player_image,
            Occupant.OBSTACLE: self.settings.obstacle_image,
            Occupant.REWARD: self.settings.reward_image,
        }
        for kind, name in mapping.items():
            path = self.root / "assets" / "images" / name
            image = None
            if path.exists():
                try:
                    image = pygame.image.load(str(path)).convert_alpha()
                except pygame.error:
                    logger.warning("Unreadable image %s, using placeholder", path)
            if image is None:
                self.images[kind] = (self._placeholder(kind), (0, 0))
            else:
                self.images[kind] = fit_image(image, self.cell_size)

    def _placeholder(self, kind: Occupant) -> pygame.Surface:
        size = self.cell_size
        surface = pygame.Surface((size, size), pygame.SRCALPHA)
        if kind is Occupant.PLAYER:
            points = [(size // 8, size // 8), (size - size // 8, size // 2), (size // 8, size - size // 8)]
            pygame.draw.polygon(surface, CYAN, points)
        elif kind is Occupant.OBSTACLE:
            pygame.draw.circle(surface, RED, (size // 2, size // 2), max(1, size * 2 // 5))
        else:
            pygame.draw.circle(surface, YELLOW, (size // 2, size // 2), max(1, size // 3))
        return surface

    def show_occupant(self, row: int, col: int, occupant: Occupant) -> None:
        self.occupants[row][col] = occupant

    def show_color(self, row: int, col: int, color: Color) -> None:
        self.colors[row][col] = color

    def set_title(self, text: str) -> None:
        self.title = text
        pygame.display.set_caption(text)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every cell: background color, occupant image, optional outline."""
        size = self.cell_size
        for row in range(self.rows):
            for col in range(self.cols):
                rect = pygame.Rect(col * size, row * size, size, size)
                surface.fill(self.colors[row][col], rect)
                occupant = self.occupants[row][col]
                if occupant is not Occupant.EMPTY:
                    image, (dx, dy) = self.images[occupant]
                    surface.blit(image, (rect.x + dx, rect.y + dy))
                if self.settings.show_grid_lines:
                    pygame.draw.rect(surface, LINE_COLOR, rect, 1)

    def refresh(self) -> None:
        """Redraw the window from the mirrored cell state."""
        self.draw(self.screen)
        pygame.display.flip()

    def save_screenshot(self, path: Path) -> None:
        """Save an image of the current board; the format follows the file extension."""
        if not Path(path).suffix:
            raise ValueError(f"invalid image file name: {path}")
        self.draw(self.screen)
        pygame.image.save(self.screen, str(path))

    def close(self) -> None:
        pygame.quit()

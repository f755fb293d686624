"""On-screen messages and score display."""

from __future__ import annotations

from pathlib import Path

import pygame

FONT_PATH = Path("Fonts") / "mayqueen.ttf"
FONT_SIZE = 72
SCORE_FONT_PATH = Path("Fonts") / "SCRIPTIN.ttf"
SCORE_FONT_SIZE = 16
COLOR = (0, 0, 0)

GAME_OVER_LINES = ("Game Over!", "Play Again?")
TEAM_SELECTION_LINES = (
    "Please Select A Character:",
    "Press 'B' for Bee and 'W' for Wasp.",
)
SCORE_LABEL = "Score: "


def _load_font(path: Path, size: int) -> pygame.font.Font:
    """Open a font file, using pygame's default font when it is absent."""
    return pygame.font.Font(str(path) if path.is_file() else None, size)


class Text:
    """Renders the game's text onto a surface."""

    def __init__(self, root: str | Path = ".") -> None:
        pygame.font.init()
        root = Path(root)
        self.color = COLOR
        self.font = _load_font(root / FONT_PATH, FONT_SIZE)
        self.score_font = _load_font(root / SCORE_FONT_PATH, SCORE_FONT_SIZE)
        self.sc_hth = 0
        self.sc_wdth = 0

    def set_screen_area(self, sc_hth: int, sc_wdth: int) -> None:
        self.sc_hth = sc_hth
        self.sc_wdth = sc_wdth

    def _blit(self, surface: pygame.Surface, rendered: pygame.Surface, rect: pygame.Rect) -> None:
        if rect.width > 0 and rect.height > 0:
            surface.blit(pygame.transform.scale(rendered, rect.size), rect.topleft)

    def _two_lines(self, surface: pygame.Surface, lines: tuple[str, str]) -> tuple[pygame.Rect, pygame.Rect]:
        siding = self.sc_wdth // 6
        flooring = self.sc_hth // 8
        top_x = (self.sc_wdth - 2 * siding) // 3
        top_y_1 = flooring * 2
        top_y_2 = top_y_1 * 2

        first, second = (self.font.render(line, False, self.color) for line in lines)
        # Both lines take the size of the second rendered line.
        size = second.get_size()
        rect_1 = pygame.Rect((top_x, top_y_1), size)
        rect_2 = pygame.Rect((top_x, top_y_2), size)
        self._blit(surface, first, rect_1)
        self._blit(surface, second, rect_2)
        return rect_1, rect_2

    def team_selection(self, surface: pygame.Surface) -> tuple[pygame.Rect, pygame.Rect]:
        return self._two_lines(surface, TEAM_SELECTION_LINES)

    def game_over(self, surface: pygame.Surface) -> tuple[pygame.Rect, pygame.Rect]:
        return self._two_lines(surface, GAME_OVER_LINES)

    def display_score(self, surface: pygame.Surface, bee_score: int, wasp_score: int) -> list[pygame.Rect]:
        """Draw both scores; return the bee label, bee value, wasp label and wasp value rectangles."""
        siding = self.sc_wdth // 6
        flooring = self.sc_hth // 8
        top_x = siding // 2

        label = self.font.render(SCORE_LABEL, False, self.color)
        bee_value = self.score_font.render(str(bee_score), False, self.color)
        wasp_value = self.score_font.render(str(wasp_score), False, self.color)

        label_w = label.get_width()
        height = wasp_value.get_height()

        bee_label_rect = pygame.Rect(siding, flooring, label_w, height)
        wasp_label_rect = pygame.Rect(siding * 4, flooring, label_w, height)
        bee_value_rect = pygame.Rect(siding + top_x, flooring, label_w // 4, height)
        wasp_value_rect = pygame.Rect(top_x + siding * 4, flooring, label_w // 4, height)

        self._blit(surface, label, bee_label_rect)
        self._blit(surface, bee_value, bee_value_rect)
        self._blit(surface, label, wasp_label_rect)
        self._blit(surface, wasp_value, wasp_value_rect)
        return [bee_label_rect, bee_value_rect, wasp_label_rect, wasp_value_rect]
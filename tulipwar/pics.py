"""Sprite layout and drawing for the playing field."""

from __future__ import annotations

from pathlib import Path

import pygame

DRAWN_DIR = Path("Images") / "Drawn"
ADDITIONAL_DIR = Path("Images") / "Additional"

DRAWN_IMAGES = (
    "Title.png",
    "Bee1.png",
    "Bee2.png",
    "Bee3.png",
    "Grub.png",
    "Tulip1.png",
    "Wasp.png",
    "Wasp2.png",
    "Wasp3.png",
    "Top_Flowers.png",
    "Bottom_Flowers.png",
    "Bee_paddle.png",
    "Wasp_paddle.png",
)
ADDITIONAL_IMAGES = ("Background.jpg",)

(
    TITLE,
    BEE_1,
    BEE_2,
    BEE_3,
    GRUB,
    TULIP,
    WASP_1,
    WASP_2,
    WASP_3,
    TOP_FLOWERS,
    BOTTOM_FLOWERS,
    BEE_PADDLE,
    WASP_PADDLE,
    BACKGROUND,
) = range(len(DRAWN_IMAGES) + len(ADDITIONAL_IMAGES))

BALL_DIVISOR = 45


class Pics:
    """Loads the game's images and places them on a surface."""

    def __init__(self, root: str | Path = ".") -> None:
        root = Path(root)
        paths = [root / DRAWN_DIR / name for name in DRAWN_IMAGES]
        paths += [root / ADDITIONAL_DIR / name for name in ADDITIONAL_IMAGES]
        self.files: dict[int, Path] = dict(enumerate(paths))
        self.sc_hth = 0
        self.sc_wdth = 0
        self.ball_l = 0
        self.ball_w = 0
        self._cache: dict[int, pygame.Surface | None] = {}

    def set_screen_size(self, sc_hth: int, sc_wdth: int) -> None:
        self.sc_hth = sc_hth
        self.sc_wdth = sc_wdth

    def _image(self, index: int) -> pygame.Surface | None:
        if index not in self._cache:
            path = self.files[index]
            self._cache[index] = pygame.image.load(str(path)) if path.is_file() else None
        return self._cache[index]

    def _draw(self, surface: pygame.Surface, index: int, rect: pygame.Rect | None = None) -> None:
        """Draw an image stretched to ``rect``, or over the whole surface; missing images draw nothing."""
        image = self._image(index)
        if image is None:
            return
        if rect is None:
            rect = surface.get_rect()
        if rect.width <= 0 or rect.height <= 0:
            return
        surface.blit(pygame.transform.scale(image, rect.size), rect.topleft)

    def _character_rects(self) -> tuple[pygame.Rect, pygame.Rect]:
        side = self.sc_wdth // 6
        top = self.sc_hth // 8
        fill = self.sc_hth - 2 * top
        bee = pygame.Rect(0, top, side, fill)
        wasp = pygame.Rect(self.sc_wdth - side, top, side, fill)
        return bee, wasp

    def install_tulips(self, surface: pygame.Surface) -> tuple[pygame.Rect, pygame.Rect]:
        """Draw the flower borders; return the (top, bottom) rectangles."""
        band = self.sc_hth // 8
        top = pygame.Rect(0, 0, self.sc_wdth, band)
        bottom = pygame.Rect(0, self.sc_hth - band, self.sc_wdth, band)
        self._draw(surface, BOTTOM_FLOWERS, bottom)
        self._draw(surface, TOP_FLOWERS, top)
        return top, bottom

    def render_title(self, surface: pygame.Surface) -> pygame.Rect:
        band = self.sc_hth // 8
        rect = pygame.Rect(0, band, self.sc_wdth, self.sc_hth - 2 * band)
        self._draw(surface, TITLE, rect)
        return rect

    def add_normal_characters(self, surface: pygame.Surface) -> tuple[pygame.Rect, pygame.Rect]:
        bee, wasp = self._character_rects()
        self._draw(surface, BEE_3, bee)
        self._draw(surface, WASP_3, wasp)
        return bee, wasp

    def victory(self, surface: pygame.Surface, victor: bool) -> tuple[pygame.Rect, pygame.Rect]:
        """Draw the characters in their winning or losing poses."""
        bee, wasp = self._character_rects()
        bee_image, wasp_image = (BEE_1, WASP_2) if victor else (BEE_2, WASP_1)
        self._draw(surface, bee_image, bee)
        self._draw(surface, wasp_image, wasp)
        return bee, wasp

    def create_background(self, surface: pygame.Surface) -> None:
        self._draw(surface, BACKGROUND)

    def add_ball(self, ball_x: int, ball_y: int, surface: pygame.Surface) -> pygame.Rect:
        """Draw the ball, keeping it round on non-square screens, and record its size."""
        ratio = self.sc_hth / self.sc_wdth
        size_w = self.sc_wdth // BALL_DIVISOR
        size_h = self.sc_hth // BALL_DIVISOR
        if ratio > 1:
            size_w = int(size_w * ratio)
        else:
            size_h = int(size_h / ratio)
        rect = pygame.Rect(ball_x, ball_y, size_w, size_h)
        self._draw(surface, GRUB, rect)
        self.ball_l = size_h
        self.ball_w = size_w
        return rect

    def add_paddles(
        self,
        bee_paddle_y: int,
        surface: pygame.Surface,
        wasp_paddle_y: int,
        paddle_h: int,
    ) -> tuple[pygame.Rect, pygame.Rect]:
        """Draw both paddles; return the (bee, wasp) rectangles."""
        edge_w = self.sc_wdth // 6
        paddle_w = edge_w // 6
        spc = paddle_w // 2
        bee_x = edge_w + spc
        wasp_x = (self.sc_wdth - edge_w) - (paddle_w + spc)
        bee = pygame.Rect(bee_x, bee_paddle_y, paddle_w, paddle_h)
        wasp = pygame.Rect(wasp_x, wasp_paddle_y, paddle_w, paddle_h)
        self._draw(surface, BEE_PADDLE, bee)
        self._draw(surface, WASP_PADDLE, wasp)
        return bee, wasp


class Win:
    """Shows the winning screen."""

    def __init__(self, pics: Pics) -> None:
        self.pics = pics

    def show_winner(self, vic: bool, surface: pygame.Surface) -> tuple[pygame.Rect, pygame.Rect]:
        return self.pics.victory(surface, vic)
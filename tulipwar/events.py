"""Game stages: what is shown, scoring and the end of the match."""

from __future__ import annotations

import pygame

from tulipwar.pics import Pics, Win
from tulipwar.text import Text

WINNING_SCORE = 5
GAME_OVER_EVENT = 3


class Events:
    """Decides what each stage of the game shows and keeps track of points."""

    def __init__(self, pics: Pics, text: Text) -> None:
        self.pics = pics
        self.text = text
        self.win = Win(pics)
        self.sc_hth = 0
        self.sc_wdth = 0
        self.winner = False
        self.win_team = False

    def set_screen_parameters(self, sc_hth: int, sc_wdth: int) -> None:
        self.sc_hth = sc_hth
        self.sc_wdth = sc_wdth
        self.text.set_screen_area(sc_hth, sc_wdth)
        self.pics.set_screen_size(sc_hth, sc_wdth)

    def call_text(self, surface: pygame.Surface, event: int) -> list[pygame.Rect]:
        """Draw the pictures and text for a stage; return the rectangles drawn."""
        if event == 0:
            return [self.pics.render_title(surface)]
        if event == 1:
            return [*self.pics.add_normal_characters(surface), *self.text.team_selection(surface)]
        if event == 2:
            if self.winner:
                return list(self.win.show_winner(self.win_team, surface))
            return list(self.pics.add_normal_characters(surface))
        if event == GAME_OVER_EVENT:
            return [*self.pics.add_normal_characters(surface), *self.text.game_over(surface)]
        return []

    def show_point(
        self, surface: pygame.Surface, event: int, bee_score: int, wasp_score: int
    ) -> list[pygame.Rect] | None:
        """Show the score once play has begun."""
        if event >= 2:
            return self.text.display_score(surface, bee_score, wasp_score)
        return None

    def call_point(self, bee_score: int, wasp_score: int, ball_x: int) -> tuple[int, int]:
        """Award a point when the ball reaches a side; return the (bee, wasp) scores."""
        side_1 = self.sc_wdth // 6
        side_2 = self.sc_wdth - side_1
        if ball_x <= side_1:
            bee_score += 1
            self.winner = True
            self.win_team = False
        elif ball_x >= side_2:
            wasp_score += 1
            self.winner = True
            self.win_team = True
        else:
            self.winner = False
        return bee_score, wasp_score

    def call_end_game(self, bee_score: int, wasp_score: int, event: int) -> int:
        """Return the game-over stage once a side reaches the winning score."""
        if WINNING_SCORE in (bee_score, wasp_score):
            return GAME_OVER_EVENT
        return event
"""Paddle and ball movement for the computer-controlled side of the match."""

from __future__ import annotations

import random
from collections.abc import Sequence

import pygame

from tulipwar.pics import Pics

# Distance past a side wall the ball may travel before the point is over.
SCORE_MARGIN = 50


class AI:
    """Moves the paddles and the ball and detects collisions."""

    def __init__(self, pics: Pics) -> None:
        self.pics = pics
        self.paddle_ball_loc: list[int] = []
        self.sc_hth = 0
        self.sc_wdth = 0
        self.paddle_h = 0
        self.max_y = 0
        self.min_y = 0
        self.paddle_speed = 0
        self.paddle_dir = False
        self.ball_speed = 0
        self.team = True
        self.event = 0
        self.bee_y = 0
        self.wasp_y = 0
        self.ball_dir_x = False
        self.ball_dir_y = False

    def get_params(self, sc_h: int, sc_w: int, spd: int, tm: bool, evt: int, b_y: int, w_y: int) -> None:
        """Take the screen size, speed, chosen team, game stage and paddle positions for this frame."""
        self.sc_hth = sc_h
        self.sc_wdth = sc_w
        self.paddle_h = sc_h // 8
        self.max_y = sc_h // 4
        self.min_y = (sc_h // 4) * 3
        self.paddle_speed = spd
        self.team = tm
        self.event = evt
        self.wasp_y = w_y
        self.bee_y = b_y
        self.ball_speed = spd

    def check_paddle(self, y: int) -> int:
        """Clamp a paddle's top edge so the whole paddle stays inside the field."""
        if y < self.max_y:
            return self.max_y
        if y + self.paddle_h <= self.min_y:
            return y
        return self.min_y - self.paddle_h

    def move_paddles(self, surface: pygame.Surface, player_paddle_y: int) -> list[int]:
        """Place the player's paddle, move the opponent's; return [bee_y, wasp_y, player_y]."""
        if self.team:
            self.bee_y = self.check_paddle(player_paddle_y)
            player_y = self.bee_y
            self.wasp_y = self.move_enemy_paddle(self.wasp_y)
        else:
            self.wasp_y = self.check_paddle(player_paddle_y)
            player_y = self.wasp_y
            self.bee_y = self.move_enemy_paddle(self.bee_y)

        self.pics.add_paddles(self.bee_y, surface, self.wasp_y, self.paddle_h)
        return [self.bee_y, self.wasp_y, player_y]

    def move_enemy_paddle(self, y: int) -> int:
        """Move the opponent's paddle one step, turning round at the field's edges."""
        y = y + self.paddle_speed if self.paddle_dir else y - self.paddle_speed
        clamped = self.check_paddle(y)
        if clamped != y:
            self.paddle_dir = not self.paddle_dir
        return clamped

    def check_collision(self, pads: Sequence[int], ball_x: int, ball_y: int) -> bool:
        """Tell whether the ball touches either paddle."""
        bee_y, wasp_y = pads[0], pads[1]

        edge_w = self.pics.sc_wdth // 6
        paddle_w = edge_w // 6
        spc = paddle_w // 2
        bee_x = edge_w + spc
        wasp_x = (self.sc_wdth - edge_w) - (paddle_w + spc)

        ball_far_x = ball_x + self.pics.ball_w

        def overlaps(pad_x: int) -> bool:
            return pad_x < ball_x < pad_x + paddle_w or pad_x < ball_far_x < pad_x + paddle_w

        if overlaps(bee_x):
            return bee_y < ball_y < bee_y + self.paddle_h
        if overlaps(wasp_x):
            return wasp_y < ball_y < wasp_y + self.paddle_h
        return False

    def check_ball_loc(self, ball_x: int, ball_y: int) -> list[int]:
        """Return the ball's position, sent back to the centre once it is past a side."""
        side_1 = self.pics.sc_wdth // 6
        side_2 = self.pics.sc_wdth - side_1
        if ball_x < side_1 - SCORE_MARGIN or ball_x > side_2 + SCORE_MARGIN:
            return [self.sc_wdth // 2, self.sc_hth // 2]
        return [ball_x, ball_y]

    def move_ball(self, pads: Sequence[int], ball_x: int, ball_y: int, surface: pygame.Surface) -> list[int]:
        """Move the ball one step, bouncing off the flower borders and the paddles."""
        if ball_y <= self.sc_hth // 4:
            ball_y += self.ball_speed
            self.ball_dir_y = True
        elif ball_y >= 3 * (self.sc_hth // 4):
            ball_y -= self.ball_speed
            self.ball_dir_y = False
        elif self.ball_dir_y:
            ball_y += self.ball_speed
        else:
            ball_y -= self.ball_speed

        if self.check_collision(pads, ball_x, ball_y):
            ball_x = ball_x - self.ball_speed if self.ball_dir_x else ball_x + self.ball_speed
            self.ball_dir_x = not self.ball_dir_x
        else:
            ball_x = ball_x + self.ball_speed if self.ball_dir_x else ball_x - self.ball_speed

        return self.check_ball_loc(ball_x, ball_y)

    def play_ball(self, surface: pygame.Surface, ball_x: int, ball_y: int, player_paddle_y: int) -> None:
        """Advance one frame and store [bee_y, wasp_y, player_y, ball_x, ball_y] in paddle_ball_loc."""
        self.pics.set_screen_size(self.sc_hth, self.sc_wdth)

        if self.event == 1:
            self.ball_dir_x = random.random() < 0.5

        if self.event == 2:
            paddles = self.move_paddles(surface, player_paddle_y)
            ball = self.move_ball(paddles, ball_x, ball_y, surface)
            self.pics.add_ball(ball[0], ball[1], surface)
            self.paddle_ball_loc = paddles + ball
        else:
            p_y = self.sc_hth // 2 - self.paddle_h // 2
            self.paddle_ball_loc = [p_y, p_y, p_y, self.sc_wdth // 2, self.sc_hth // 2]
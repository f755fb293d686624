import pygame
import pytest

from tulipwar.pics import Pics, Win

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
GREEN = (0, 255, 0, 255)
WHITE = (255, 255, 255, 255)
YELLOW = (255, 255, 0, 255)


def _make_image(path, color):
    path.parent.mkdir(parents=True, exist_ok=True)
    image = pygame.Surface((4, 4))
    image.fill(color)
    pygame.image.save(image, str(path))


def _pics(root, width=600, height=800):
    pics = Pics(root)
    pics.set_screen_size(height, width)
    return pics


def _canvas(pics):
    surface = pygame.Surface((pics.sc_wdth, pics.sc_hth))
    surface.fill(WHITE)
    return surface


def test_file_table(tmp_path):
    pics = Pics(tmp_path)
    assert len(pics.files) == 14
    assert pics.files[0].name == "Title.png"
    assert pics.files[12].name == "Wasp_paddle.png"
    assert pics.files[13].name == "Background.jpg"
    assert pics.files[0].parent == tmp_path / "Images" / "Drawn"
    assert pics.files[13].parent == tmp_path / "Images" / "Additional"


def test_tulip_bands_cover_top_and_bottom(tmp_path):
    pics = _pics(tmp_path)
    top, bottom = pics.install_tulips(_canvas(pics))
    assert top.y == 0
    assert bottom.bottom == pics.sc_hth
    assert top.height == bottom.height
    assert top.width == bottom.width == pics.sc_wdth


def test_tulips_are_drawn(tmp_path):
    _make_image(tmp_path / "Images/Drawn/Top_Flowers.png", RED)
    _make_image(tmp_path / "Images/Drawn/Bottom_Flowers.png", BLUE)
    pics = _pics(tmp_path)
    surface = _canvas(pics)
    top, bottom = pics.install_tulips(surface)
    assert surface.get_at(top.center) == RED
    assert surface.get_at(bottom.center) == BLUE
    assert surface.get_at((pics.sc_wdth // 2, pics.sc_hth // 2)) == WHITE


def test_title_fills_middle(tmp_path):
    _make_image(tmp_path / "Images/Drawn/Title.png", GREEN)
    pics = _pics(tmp_path)
    surface = _canvas(pics)
    rect = pics.render_title(surface)
    assert rect.x == 0 and rect.width == pics.sc_wdth
    assert rect.y * 2 + rect.height == pics.sc_hth
    assert surface.get_at(rect.center) == GREEN
    assert surface.get_at((0, 0)) == WHITE


def test_missing_images_draw_nothing(tmp_path):
    pics = _pics(tmp_path)
    surface = _canvas(pics)
    rect = pics.render_title(surface)
    bee, wasp = pics.add_normal_characters(surface)
    assert surface.get_at(rect.center) == WHITE
    assert surface.get_at(bee.center) == WHITE
    assert surface.get_at(wasp.center) == WHITE


def test_normal_characters_layout_and_images(tmp_path):
    _make_image(tmp_path / "Images/Drawn/Bee3.png", YELLOW)
    _make_image(tmp_path / "Images/Drawn/Wasp3.png", RED)
    pics = _pics(tmp_path)
    surface = _canvas(pics)
    bee, wasp = pics.add_normal_characters(surface)
    assert bee.x == 0
    assert wasp.right == pics.sc_wdth
    assert bee.size == wasp.size
    assert bee.y == wasp.y
    assert bee.y * 2 + bee.height == pics.sc_hth
    assert surface.get_at(bee.center) == YELLOW
    assert surface.get_at(wasp.center) == RED


@pytest.mark.parametrize(
    "victor, bee_color, wasp_color",
    [(True, RED, GREEN), (False, BLUE, YELLOW)],
)
def test_victory_poses(tmp_path, victor, bee_color, wasp_color):
    _make_image(tmp_path / "Images/Drawn/Bee1.png", RED)
    _make_image(tmp_path / "Images/Drawn/Bee2.png", BLUE)
    _make_image(tmp_path / "Images/Drawn/Wasp.png", YELLOW)
    _make_image(tmp_path / "Images/Drawn/Wasp2.png", GREEN)
    pics = _pics(tmp_path)
    surface = _canvas(pics)
    bee, wasp = pics.victory(surface, victor)
    assert surface.get_at(bee.center) == bee_color
    assert surface.get_at(wasp.center) == wasp_color


def test_win_shows_victory(tmp_path):
    _make_image(tmp_path / "Images/Drawn/Bee1.png", RED)
    _make_image(tmp_path / "Images/Drawn/Wasp2.png", GREEN)
    pics = _pics(tmp_path)
    surface = _canvas(pics)
    bee, wasp = Win(pics).show_winner(True, surface)
    assert (bee, wasp) == pics.victory(_canvas(pics), True)
    assert surface.get_at(bee.center) == RED
    assert surface.get_at(wasp.center) == GREEN


@pytest.mark.parametrize("width, height", [(900, 900), (450, 900), (900, 450)])
def test_ball_stays_round(tmp_path, width, height):
    pics = _pics(tmp_path, width, height)
    rect = pics.add_ball(30, 40, _canvas(pics))
    assert rect.topleft == (30, 40)
    assert rect.size == (pics.ball_w, pics.ball_l)
    assert pics.ball_w == pics.ball_l
    assert pics.ball_w > 0


def test_ball_drawn(tmp_path):
    _make_image(tmp_path / "Images/Drawn/Grub.png", GREEN)
    pics = _pics(tmp_path, 900, 900)
    surface = _canvas(pics)
    rect = pics.add_ball(100, 200, surface)
    assert surface.get_at(rect.center) == GREEN
    assert surface.get_at((rect.right + 1, rect.centery)) == WHITE


def test_paddles_layout(tmp_path):
    _make_image(tmp_path / "Images/Drawn/Bee_paddle.png", YELLOW)
    _make_image(tmp_path / "Images/Drawn/Wasp_paddle.png", RED)
    pics = _pics(tmp_path, 1000, 1000)
    surface = _canvas(pics)
    bee, wasp = pics.add_paddles(300, surface, 400, 125)
    assert bee.y == 300 and wasp.y == 400
    assert bee.height == wasp.height == 125
    assert bee.width == wasp.width
    assert bee.x > pics.sc_wdth // 6
    assert wasp.right < pics.sc_wdth - pics.sc_wdth // 6
    assert bee.x - pics.sc_wdth // 6 == pics.sc_wdth - pics.sc_wdth // 6 - wasp.right
    assert surface.get_at(bee.center) == YELLOW
    assert surface.get_at(wasp.center) == RED


def test_background_covers_surface(tmp_path):
    path = tmp_path / "Images/Additional/Background.jpg"
    _make_image(path, (200, 30, 30))
    pics = _pics(tmp_path, 200, 100)
    surface = _canvas(pics)
    pics.create_background(surface)
    for point in [(0, 0), (199, 99), (100, 50)]:
        r, g, b, _ = surface.get_at(point)
        assert abs(r - 200) < 10 and g < 50 and b < 50
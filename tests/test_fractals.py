import pytest

from fractview.colors import get_shifted_color
from fractview.fractals import (
    HEIGHT,
    JULIA_CI,
    JULIA_CR,
    MAX_ITER,
    WIDTH,
    julia_iterations,
    mandelbrot_iterations,
    render_julia,
    render_mandelbrot,
    render_tricorn,
    screen_to_complex,
    tricorn_iterations,
)
from fractview.mlx.image import Image


def test_screen_centre_maps_to_offset():
    assert screen_to_complex(WIDTH / 2, HEIGHT / 2, 1.0, 0.0, 0.0) == (0.0, 0.0)
    assert screen_to_complex(WIDTH / 2, HEIGHT / 2, 3.0, 0.25, -0.5) == (0.25, -0.5)


def test_screen_edges_at_unit_zoom():
    re, im = screen_to_complex(0, 0, 1.0, 0.0, 0.0)
    assert (re, im) == (-1.0, -1.0)


def test_zoom_shrinks_the_view():
    near = screen_to_complex(0, 0, 2.0, 0.0, 0.0)
    far = screen_to_complex(0, 0, 1.0, 0.0, 0.0)
    assert abs(near[0]) < abs(far[0])
    assert abs(near[1]) < abs(far[1])


def test_offset_shifts_every_point():
    base = screen_to_complex(123, 45, 1.5, 0.0, 0.0)
    moved = screen_to_complex(123, 45, 1.5, 0.5, -0.25)
    assert moved == pytest.approx((base[0] + 0.5, base[1] - 0.25))


def test_mandelbrot_origin_is_inside():
    assert mandelbrot_iterations(0.0, 0.0) == MAX_ITER
    assert mandelbrot_iterations(-1.0, 0.0) == MAX_ITER


def test_mandelbrot_far_point_escapes_fast():
    assert mandelbrot_iterations(3.0, 3.0) < 3


@pytest.mark.parametrize("point", [(0.3, 0.5), (-0.75, 0.1), (0.26, 0.002)])
def test_mandelbrot_is_symmetric(point):
    re, im = point
    assert mandelbrot_iterations(re, im) == mandelbrot_iterations(re, -im)


def test_julia_start_outside_radius_gives_zero():
    assert julia_iterations(10.0, 0.0, JULIA_CR, JULIA_CI) == 0


def test_julia_with_zero_c_matches_unit_disc():
    assert julia_iterations(0.5, 0.5, 0.0, 0.0) == MAX_ITER
    assert julia_iterations(1.5, 0.0, 0.0, 0.0) < MAX_ITER


def test_julia_from_zero_matches_mandelbrot():
    for c in [(0.3, 0.5), (-0.75, 0.1), (0.1, 0.1)]:
        assert julia_iterations(0.0, 0.0, *c) == mandelbrot_iterations(*c)


def test_tricorn_origin_is_inside():
    assert tricorn_iterations(0.0, 0.0) == MAX_ITER


@pytest.mark.parametrize("point", [(0.3, 0.5), (-0.75, 0.4), (0.2, -0.9)])
def test_tricorn_is_symmetric(point):
    cr, ci = point
    assert tricorn_iterations(cr, ci) == tricorn_iterations(cr, -ci)


def test_tricorn_escape_counts_bounded():
    for cr, ci in [(2.5, 0.0), (0.0, 2.5), (-1.9, 0.3)]:
        assert 0 <= tricorn_iterations(cr, ci) <= MAX_ITER


def test_render_mandelbrot_matches_iterations():
    image = Image(4, 3)
    render_mandelbrot(image, 1.0, 0.0, 0.0)
    for y in range(3):
        for x in range(4):
            count = mandelbrot_iterations(*screen_to_complex(x, y, 1.0, 0.0, 0.0))
            assert image.get_pixel(x, y) == get_shifted_color(count, MAX_ITER, 0)


def test_render_julia_matches_iterations():
    image = Image(3, 2)
    render_julia(image, 2.0, 0.1, -0.1)
    for y in range(2):
        for x in range(3):
            zr, zi = screen_to_complex(x, y, 2.0, 0.1, -0.1)
            count = julia_iterations(zr, zi, JULIA_CR, JULIA_CI)
            assert image.get_pixel(x, y) == get_shifted_color(count, MAX_ITER, 0)


def test_render_tricorn_uses_given_max_iter():
    image = Image(3, 3)
    render_tricorn(image, 1.0, 0.0, 0.0, 50)
    for y in range(3):
        for x in range(3):
            count = tricorn_iterations(*screen_to_complex(x, y, 1.0, 0.0, 0.0))
            assert image.get_pixel(x, y) == get_shifted_color(count, 50, 3)


def test_render_tricorn_rejects_zero_max_iter():
    with pytest.raises(ValueError):
        render_tricorn(Image(2, 2), 1.0, 0.0, 0.0, 0)
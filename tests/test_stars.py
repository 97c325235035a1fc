from product_catalog.core.stars import EMPTY, FULL, HALF, rating_stars, render_stars


def counts(stars):
    return stars.count(FULL), stars.count(HALF), stars.count(EMPTY)


def test_half_star_for_point_five():
    assert counts(rating_stars(4.5)) == (4, 1, 0)


def test_whole_rating_has_no_half_star():
    assert counts(rating_stars(4.0)) == (4, 0, 1)


def test_zero_rating_is_all_empty():
    assert rating_stars(0) == [EMPTY] * 5


def test_any_fraction_gives_half_star():
    assert counts(rating_stars(4.1)) == (4, 1, 0)
    assert counts(rating_stars(2.9)) == (2, 1, 2)


def test_always_five_slots():
    for rating in (0, 0.5, 1, 3.3, 5, 7):
        assert len(rating_stars(rating)) == 5


def test_full_stars_come_first():
    assert rating_stars(3.5) == [FULL, FULL, FULL, HALF, EMPTY]


def test_render_stars():
    assert render_stars(4.5) == "★★★★⯪"
    assert render_stars(3) == "★★★☆☆"

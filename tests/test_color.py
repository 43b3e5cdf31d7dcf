"""Tests for webcolor.core.color — WebColor queries, transforms and Color()."""

import pytest
from webcolor import Color, WebColor


class TestColorFactory:
    def test_keyword_to_rgb(self) -> None:
        assert Color('black').to_string() == 'rgb(0,0,0)'

    @pytest.mark.parametrize(
        'value,expected',
        [
            ('#43C403', (67, 196, 3, 1)),
            ('#43C40399', (67, 196, 3, 0.6)),
            ('#F3A', (255, 51, 170, 1)),
            ('#F3A9', (255, 51, 170, 0.6)),
        ],
    )
    def test_hex_channels(self, value: str, expected: tuple) -> None:
        c = Color(value)
        assert (c.r, c.g, c.b, c.a) == expected

    def test_returns_same_instance(self) -> None:
        c = Color('#123456')
        assert Color(c) is c

    def test_idempotent(self) -> None:
        assert Color(Color('tomato')).to_string() == Color('tomato').to_string()

    def test_unparsable_is_none(self) -> None:
        assert Color('not a colour') is None

    def test_partial_record(self) -> None:
        assert Color({'g': 128}).to_string() == 'rgb(0,128,0)'


class TestToString:
    def test_rgba(self) -> None:
        assert Color('#43C40399').to_string() == 'rgba(67,196,3,0.6)'

    def test_hex_with_alpha(self) -> None:
        assert Color('#43C40399').to_string('hex') == '#43c40399'

    def test_hex_opaque(self) -> None:
        assert Color('#F3A').to_string('hex') == '#ff33aa'

    def test_transparent(self) -> None:
        assert Color('transparent').to_string() == 'rgba(0,0,0,0)'
        assert Color('transparent').to_string('hex') == '#00000000'

    def test_rounds_half_up(self) -> None:
        assert WebColor(10.5, 0.4, 254.5).to_string() == 'rgb(11,0,255)'

    def test_alpha_three_places(self) -> None:
        assert WebColor(0, 0, 0, 0.12345).to_string() == 'rgba(0,0,0,0.123)'

    def test_unknown_format_is_rgb(self) -> None:
        assert Color('red').to_string('hsl') == 'rgb(255,0,0)'

    def test_str(self) -> None:
        assert str(Color('red')) == 'rgb(255,0,0)'

    def test_out_of_range_kept(self) -> None:
        assert Color('rgb(300,-5,0)').to_string() == 'rgb(300,-5,0)'


class TestMetrics:
    def test_brightness_white(self) -> None:
        assert Color('#fff').get_brightness() == 255.0

    def test_brightness_weights(self) -> None:
        assert Color('#f00').get_brightness() == pytest.approx(76.245)

    def test_luminance_bounds(self) -> None:
        assert Color('black').get_luminance() == 0.0
        assert Color('white').get_luminance() == pytest.approx(1.0)

    def test_luminance_linear_segment(self) -> None:
        # 10/255 = 0.0392 <= 0.03928, so the linear segment applies
        assert Color('rgb(10,10,10)').get_luminance() == pytest.approx(10 / 255 / 12.92)

    def test_alpha_ignored(self) -> None:
        assert Color('#80808000').get_luminance() == Color('#808080').get_luminance()

    def test_memoized(self) -> None:
        c = Color('#123456')
        first = c.get_luminance()
        assert '_luminance' in c.__dict__
        assert c.get_luminance() is first
        c.get_brightness()
        assert '_brightness' in c.__dict__

    def test_transform_has_fresh_cache(self) -> None:
        c = Color('#123456')
        c.get_luminance()
        assert '_luminance' not in c.invert().__dict__

    def test_is_dark(self) -> None:
        assert Color('#333').is_dark()
        assert not Color('#ccc').is_dark()

    def test_is_white_tests_zero_channels(self) -> None:
        assert Color('black').is_white()
        assert not Color('white').is_white()

    def test_is_black_tests_full_channels(self) -> None:
        assert Color('white').is_black()
        assert not Color('black').is_black()


class TestEquality:
    def test_equals_across_forms(self) -> None:
        assert Color('red').equals('#f00')
        assert Color('red').equals('rgb(255,0,0)')
        assert Color('red').equals({'r': 255})

    def test_equals_rounded_alpha(self) -> None:
        assert WebColor(255, 0, 0, 0.6001).equals(WebColor(255, 0, 0, 0.6))

    def test_reflexive_and_symmetric(self) -> None:
        a, b = Color('#808080'), Color('grey')
        assert a.equals(a)
        assert a.equals(b) and b.equals(a)

    def test_not_equal(self) -> None:
        assert not Color('red').equals('blue')

    def test_unparsable_is_not_equal(self) -> None:
        assert not Color('red').equals('garbage')

    def test_dunder_eq_and_hash(self) -> None:
        assert Color('red') == Color('#ff0000')
        assert hash(Color('red')) == hash(Color('#ff0000'))
        assert len({Color('red'), Color('#f00'), Color('blue')}) == 2

    def test_dunder_eq_other_types(self) -> None:
        assert Color('red') != 'rgb(255,0,0)'


class TestWithAlpha:
    @pytest.mark.parametrize('value,expected', [(0.5, 0.5), (0, 0), (1, 1), (50, 0.5), (100, 1.0)])
    def test_accepted(self, value: float, expected: float) -> None:
        assert Color('red').with_alpha(value).a == expected

    @pytest.mark.parametrize('value', [-0.1, 100.5, 101, 'x', None, True])
    def test_rejected(self, value) -> None:
        assert Color('red').with_alpha(value) is None

    def test_original_untouched(self) -> None:
        c = Color('red')
        c.with_alpha(0.2)
        assert c.a == 1


class TestInvert:
    def test_invert(self) -> None:
        assert Color('#3366cc').invert().to_string('hex') == '#cc9933'

    def test_keeps_alpha(self) -> None:
        assert Color('#3366cc80').invert().a == Color('#3366cc80').a


class TestShadeBlend:
    def test_full_darken(self) -> None:
        assert Color('#808080').shade_blend(-1).to_string() == 'rgb(0,0,0)'

    def test_full_lighten(self) -> None:
        assert Color('#808080').shade_blend(1).to_string() == 'rgb(255,255,255)'

    def test_linear_half(self) -> None:
        assert Color('#000').shade_blend(0.5, linear=True).to_string() == 'rgb(128,128,128)'

    def test_gamma_half(self) -> None:
        # sqrt(0.5 * 255**2) = 180.3
        assert Color('#000').shade_blend(0.5).to_string() == 'rgb(180,180,180)'

    def test_blend_target(self) -> None:
        assert Color('red').shade_blend(0.5, 'blue', linear=True).to_string() == 'rgb(128,0,128)'

    def test_negative_p_with_blend_uses_blend(self) -> None:
        assert Color('red').shade_blend(-0.5, 'blue', linear=True).to_string() == 'rgb(128,0,128)'

    def test_zero_is_identity(self) -> None:
        assert Color('#3366cc').shade_blend(0).equals('#3366cc')

    @pytest.mark.parametrize('p', [-1.01, 1.5, 'x', None, True, float('nan')])
    def test_invalid_p(self, p) -> None:
        assert Color('red').shade_blend(p) is None

    def test_unparsable_blend(self) -> None:
        assert Color('red').shade_blend(0.5, 'garbage') is None

    def test_alpha_blends(self) -> None:
        assert WebColor(0, 0, 0, 0).shade_blend(0.5).a == 0.5

    def test_negative_alpha_other_side_wins(self) -> None:
        assert WebColor(0, 0, 0, -1).shade_blend(0.5).a == 1
        assert WebColor(0, 0, 0, 0.3).shade_blend(0.5, {'a': -1}).a == 0.3

    def test_both_alphas_negative(self) -> None:
        assert WebColor(0, 0, 0, -1).shade_blend(0.5, {'a': -1}).a == 1

    def test_returns_new_value(self) -> None:
        c = Color('#808080')
        assert c.shade_blend(0.2) is not c
        assert c.to_string() == 'rgb(128,128,128)'


class TestNonFiniteInput:
    def test_infinite_alpha_does_not_build_a_colour(self) -> None:
        assert Color('rgba(0,0,0,1e999)') is None

    def test_equals_rejects_infinite_alpha(self) -> None:
        assert not Color('#000').equals('rgba(0,0,0,1e999)')

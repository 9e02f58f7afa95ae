from domain.models import (
    cloth_from_dict, cart_item_from_dict, recommendation_from_dict, split_options,
)
from utils.formatting import category_icon, category_label, format_price, format_total, format_date


def test_split_options_trims_and_drops_blanks():
    assert split_options(' S, M ,,L ') == ['S', 'M', 'L']
    assert split_options('') == []
    assert split_options(None) == []


def test_cloth_from_dict_tolerates_extra_columns_and_bad_price():
    cloth = cloth_from_dict({'id': 1, 'name': 'x', 'price': 'n/a', 'image_url': 'ignored',
                             'description': None})
    assert cloth.price == 0.0
    assert cloth.description == ''
    assert cloth.color_options == []


def test_cart_item_embedded_cloth_list_form():
    item = cart_item_from_dict({'id': 1, 'user_id': 'u', 'cloth_id': 2, 'quantity': '2',
                                'clothes': [{'id': 2, 'name': 'y', 'price': 10}]})
    assert item.quantity == 2
    assert item.line_total == 20


def test_recommendation_viewed_at_falls_back_to_created_at():
    rec = recommendation_from_dict({'cloth_id': 1, 'created_at': '2024-01-02T00:00:00+00:00'})
    assert rec.viewed_at == '2024-01-02T00:00:00+00:00'
    assert rec.user_id is None


def test_category_display():
    assert category_label('women') == '女装'
    assert category_label('shoes') == '服装'
    assert category_icon('kids') == '👶'
    assert category_icon(None) == '👕'


def test_price_formatting():
    assert format_price(299) == '¥299'
    assert format_price('239.5') == '¥239.50'
    assert format_total(797) == '¥797.00'


def test_format_date():
    assert format_date('2024-03-05T10:00:00Z') == '2024/3/5'
    assert format_date(None) == '—'

from restaurant_matrix.places.models import OpenStatus, Place, PlacesQuery
from restaurant_matrix.places.normalize import (
    apply_query_filters,
    normalize_place,
    normalize_places,
)


def _raw(**overrides):
    raw = {
        "id": "abc",
        "placeId": "ChIJabc",
        "displayName": {"text": "Oishii Boston"},
        "rating": 4.6,
        "userRatingCount": 812,
        "priceLevel": 3,
        "types": ["sushi_restaurant", "restaurant"],
        "currentOpeningHours": {"openNow": True},
        "businessStatus": "OPERATIONAL",
    }
    raw.update(overrides)
    return raw


def test_normalize_maps_all_fields():
    place = normalize_place(_raw())

    assert place == Place(
        id="abc",
        place_id="ChIJabc",
        name="Oishii Boston",
        rating=4.6,
        user_ratings_total=812,
        price_level=3,
        types=["sushi_restaurant", "restaurant"],
        open_now=OpenStatus.open,
    )


def test_normalize_defaults_missing_fields_and_bad_price():
    raw = {"id": "x", "businessStatus": "OPERATIONAL", "priceLevel": 7}

    place = normalize_place(raw)

    assert place is not None
    assert place.rating == 0
    assert place.user_ratings_total == 0
    assert place.price_level == 0
    assert place.types == []
    assert place.name == "Unknown"
    assert place.place_id is None
    assert place.open_now is OpenStatus.unknown


def test_normalize_keeps_unknown_open_status():
    raw = _raw()
    del raw["currentOpeningHours"]

    assert normalize_place(raw).open_now is OpenStatus.unknown
    assert normalize_place(_raw(currentOpeningHours={})).open_now is OpenStatus.unknown


def test_normalize_closed_flag():
    place = normalize_place(_raw(currentOpeningHours={"openNow": False}))
    assert place.open_now is OpenStatus.closed


def test_normalize_drops_non_operating():
    assert normalize_place(_raw(businessStatus="CLOSED_PERMANENTLY")) is None
    assert normalize_place(_raw(businessStatus=None)) is None


def test_normalize_price_level_enum_names():
    assert normalize_place(_raw(priceLevel="PRICE_LEVEL_MODERATE")).price_level == 2
    assert normalize_place(_raw(priceLevel="PRICE_LEVEL_VERY_EXPENSIVE")).price_level == 4
    assert normalize_place(_raw(priceLevel="PRICE_LEVEL_UNSPECIFIED")).price_level == 0


def test_normalize_price_level_rejects_non_integers():
    assert normalize_place(_raw(priceLevel=-1)).price_level == 0
    assert normalize_place(_raw(priceLevel=2.5)).price_level == 0
    assert normalize_place(_raw(priceLevel=True)).price_level == 0


def test_normalize_clamps_rating_and_count():
    place = normalize_place(_raw(rating=7.2, userRatingCount=-3))
    assert place.rating == 5.0
    assert place.user_ratings_total == 0


def test_normalize_places_filters_out_non_operating():
    raws = [_raw(id="1"), _raw(id="2", businessStatus="CLOSED_TEMPORARILY"), _raw(id="3")]

    places = normalize_places(raws)

    assert [p.id for p in places] == ["1", "3"]


def _place(pid, price, status):
    return Place(id=pid, name=pid, price_level=price, open_now=status)


def test_apply_query_filters_price_inclusive():
    places = [_place(str(i), i, OpenStatus.unknown) for i in range(5)]

    kept = apply_query_filters(places, PlacesQuery(min_price=1, max_price=3))

    assert [p.price_level for p in kept] == [1, 2, 3]


def test_apply_query_filters_open_now_keeps_unknown():
    places = [
        _place("open", 2, OpenStatus.open),
        _place("closed", 2, OpenStatus.closed),
        _place("unknown", 2, OpenStatus.unknown),
    ]

    kept = apply_query_filters(places, PlacesQuery(open_now=True))
    assert [p.id for p in kept] == ["open", "unknown"]

    kept = apply_query_filters(places, PlacesQuery(open_now=False))
    assert len(kept) == 3


def test_normalize_tolerates_wrongly_typed_fields():
    place = normalize_place(
        _raw(displayName="Toro", currentOpeningHours=[True], placeId=123, types="bar")
    )

    assert place.name == "Unknown"
    assert place.open_now is OpenStatus.unknown
    assert place.place_id == "123"
    assert place.types == []


def test_normalize_skips_non_string_types():
    assert normalize_place(_raw(types=["bar", 7, None])).types == ["bar"]


def test_normalize_non_finite_numbers_become_zero():
    place = normalize_place(_raw(rating=float("nan"), userRatingCount=float("inf")))
    assert place.rating == 0.0
    assert place.user_ratings_total == 0

    assert normalize_place(_raw(rating=float("inf"))).rating == 0.0


def test_normalize_places_ignores_non_object_records():
    assert [p.id for p in normalize_places(["oops", None, _raw(id="1")])] == ["1"]

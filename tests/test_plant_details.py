"""Tests for flattening Trefle plant detail payloads."""

from plants.service import build_plant_details, extract_growth_conditions

GROWTH_KEYS = {"min_temp", "max_temp", "min_humidity", "max_humidity"}


def _payload(**growth):
    return {
        "data": {
            "id": 123,
            "common_name": "Dog rose",
            "slug": "rosa-canina",
            "growth": growth,
        },
        "meta": {"last_modified": "2020-01-01"},
    }


class TestBuildPlantDetails:

    def test_flattens_growth_conditions(self):
        payload = _payload(
            minimum_temperature={"deg_f": 23, "deg_c": -5},
            maximum_temperature={"deg_f": 86, "deg_c": 30},
            minimum_relative_humidity=40,
            maximum_relative_humidity=80,
        )

        details = build_plant_details(payload)

        assert details["min_temp"] == -5
        assert details["max_temp"] == 30
        assert details["min_humidity"] == 40
        assert details["max_humidity"] == 80

    def test_keeps_plant_fields_and_drops_envelope(self):
        details = build_plant_details(_payload())

        assert details["id"] == 123
        assert details["common_name"] == "Dog rose"
        assert "growth" in details
        assert "meta" not in details
        assert "data" not in details

    def test_missing_growth_yields_nulls(self):
        details = build_plant_details({"data": {"id": 1}})

        assert details == {
            "id": 1,
            "min_temp": None,
            "max_temp": None,
            "min_humidity": None,
            "max_humidity": None,
        }

    def test_null_links_yield_nulls(self):
        payload = _payload(minimum_temperature=None, maximum_temperature={"deg_c": None})
        payload["data"]["growth"]["minimum_relative_humidity"] = None

        details = build_plant_details(payload)

        assert details["min_temp"] is None
        assert details["max_temp"] is None
        assert details["min_humidity"] is None

    def test_non_object_links_yield_nulls(self):
        details = build_plant_details({"data": {"growth": "unknown"}})

        assert details["min_temp"] is None
        assert details["growth"] == "unknown"

    def test_missing_or_null_data_gives_only_growth_keys(self):
        for payload in ({}, {"data": None}, {"data": []}, None, ["not", "an", "object"]):
            details = build_plant_details(payload)
            assert set(details) == GROWTH_KEYS
            assert all(value is None for value in details.values())

    def test_extracted_keys_override_existing_fields(self):
        payload = _payload(minimum_temperature={"deg_c": 2})
        payload["data"]["min_temp"] = "stale"

        assert build_plant_details(payload)["min_temp"] == 2

    def test_does_not_mutate_payload(self):
        payload = _payload(minimum_temperature={"deg_c": 2})

        build_plant_details(payload)

        assert "min_temp" not in payload["data"]

    def test_values_are_passed_through_uncoerced(self):
        payload = _payload(minimum_temperature={"deg_c": "-5"}, maximum_relative_humidity=7.5)

        conditions = extract_growth_conditions(payload["data"])

        assert conditions.min_temp == "-5"
        assert conditions.max_humidity == 7.5

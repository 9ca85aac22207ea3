"""Tests for weekly availability normalization and editor operations."""
import pytest

from app.core.exceptions import AvailabilityValidationError
from app.services.availability_service import (
    add_slot,
    apply_preset,
    availability_from_profile,
    dedupe_slots,
    normalize,
    prepare_for_submission,
    remove_slot,
    selected_days,
    slots_by_day,
    slots_for_day,
    toggle_day,
    update_slot_time,
    validate_availability,
)
from app.services.calendar_utils import DAYS

DEFAULT = {"startTime": "09:00", "endTime": "17:00"}


@pytest.fixture
def split_shift():
    return [
        {"day": "Monday", "startTime": "09:00", "endTime": "12:00"},
        {"day": "Tuesday", "startTime": "10:00", "endTime": "11:00"},
        {"day": "Monday", "startTime": "14:00", "endTime": "17:00"},
    ]


class TestNormalize:
    def test_legacy_weekday_names(self):
        result = normalize(["Monday", "Wednesday"])

        assert result == [
            {"day": "Monday", **DEFAULT},
            {"day": "Wednesday", **DEFAULT},
        ]

    def test_missing_and_empty_times_get_defaults(self):
        result = normalize(
            [
                {"day": "Friday"},
                {"day": "Saturday", "startTime": "", "endTime": "12:00"},
            ]
        )

        assert result[0] == {"day": "Friday", **DEFAULT}
        assert result[1] == {"day": "Saturday", "startTime": "09:00", "endTime": "12:00"}

    def test_day_preserved_as_given(self):
        result = normalize([{"day": "monday", "startTime": "08:00", "endTime": "09:00"}, {}])

        assert result[0]["day"] == "monday"
        assert result[1] == {"day": "", **DEFAULT}

    @pytest.mark.parametrize("raw", [None, [], "Monday", {"day": "Monday"}])
    def test_degenerate_input_returns_empty(self, raw):
        assert normalize(raw) == []

    def test_unsupported_entries_dropped(self):
        assert normalize([None, 42, "Sunday"]) == [{"day": "Sunday", **DEFAULT}]

    def test_extra_fields_are_stripped(self):
        result = normalize([{"day": "Monday", "startTime": "09:00", "endTime": "10:00", "id": 7}])

        assert set(result[0]) == {"day", "startTime", "endTime"}

    def test_does_not_mutate_input(self):
        raw = [{"day": "Monday"}]
        normalize(raw)
        assert raw == [{"day": "Monday"}]


class TestToggleDay:
    def test_toggle_on_adds_one_default_slot(self):
        assert toggle_day([], "Thursday") == [{"day": "Thursday", **DEFAULT}]

    def test_toggle_off_clears_every_slot_for_day(self, split_shift):
        result = toggle_day(split_shift, "Monday")

        assert result == [{"day": "Tuesday", "startTime": "10:00", "endTime": "11:00"}]

    def test_on_then_off_leaves_day_empty(self):
        result = toggle_day(toggle_day([], "Sunday"), "Sunday")

        assert slots_for_day(result, "Sunday") == []

    def test_off_then_on_is_not_a_round_trip(self, split_shift):
        result = toggle_day(toggle_day(split_shift, "Monday"), "Monday")

        monday = slots_for_day(result, "Monday")
        assert monday == [{"day": "Monday", **DEFAULT}]
        assert monday != slots_for_day(split_shift, "Monday")

    def test_day_matching_ignores_case(self, split_shift):
        assert slots_for_day(toggle_day(split_shift, "MONDAY"), "Monday") == []

    def test_input_untouched(self, split_shift):
        before = [dict(s) for s in split_shift]
        toggle_day(split_shift, "Monday")
        assert split_shift == before


class TestSlotEditing:
    def test_add_slot_allows_duplicates(self):
        result = add_slot(add_slot([], "Monday"), "Monday")

        assert result == [{"day": "Monday", **DEFAULT}, {"day": "Monday", **DEFAULT}]

    def test_remove_slot_uses_index_within_day(self, split_shift):
        result = remove_slot(split_shift, "Monday", 1)

        assert result == split_shift[:2]

    @pytest.mark.parametrize("index", [2, -1, 99])
    def test_remove_slot_out_of_range_is_noop(self, split_shift, index):
        assert remove_slot(split_shift, "Monday", index) == split_shift

    def test_update_slot_time_targets_day_scoped_index(self, split_shift):
        result = update_slot_time(split_shift, "Monday", 1, "endTime", "18:30")

        assert result[2]["endTime"] == "18:30"
        assert split_shift[2]["endTime"] == "17:00"

    def test_update_tolerates_inverted_range(self, split_shift):
        result = update_slot_time(split_shift, "Tuesday", 0, "startTime", "15:00")

        assert result[1] == {"day": "Tuesday", "startTime": "15:00", "endTime": "11:00"}

    def test_update_unknown_field_or_index_is_noop(self, split_shift):
        assert update_slot_time(split_shift, "Monday", 0, "day", "Friday") == split_shift
        assert update_slot_time(split_shift, "Sunday", 0, "startTime", "08:00") == split_shift


class TestPresets:
    def test_weekends_replaces_prior_state(self, split_shift):
        result = apply_preset("weekends")

        assert result == [{"day": "Saturday", **DEFAULT}, {"day": "Sunday", **DEFAULT}]

    def test_weekdays(self):
        assert [s["day"] for s in apply_preset("weekdays")] == list(DAYS[:5])

    def test_all(self):
        result = apply_preset("all")

        assert [s["day"] for s in result] == list(DAYS)
        assert all(s["startTime"] == "09:00" and s["endTime"] == "17:00" for s in result)

    def test_unknown_preset(self):
        with pytest.raises(AvailabilityValidationError):
            apply_preset("holidays")


class TestGrouping:
    def test_slots_by_day(self, split_shift):
        grouped = slots_by_day(split_shift)

        assert list(grouped) == list(DAYS)
        assert len(grouped["Monday"]) == 2
        assert grouped["Sunday"] == []

    def test_selected_days_skips_unrecognized(self, split_shift):
        assert selected_days(split_shift + [{"day": "", **DEFAULT}]) == ["Monday", "Tuesday"]


class TestSubmission:
    def test_inverted_range_rejected(self):
        with pytest.raises(AvailabilityValidationError) as exc_info:
            validate_availability([{"day": "Monday", "startTime": "17:00", "endTime": "09:00"}])

        slots = exc_info.value.details["slots"]
        assert slots[0]["index"] == 0
        assert "startTime must be before endTime" in slots[0]["errors"]

    def test_equal_start_and_end_rejected(self):
        with pytest.raises(AvailabilityValidationError):
            validate_availability([{"day": "Monday", "startTime": "09:00", "endTime": "09:00"}])

    def test_bad_day_and_time_reported(self):
        with pytest.raises(AvailabilityValidationError) as exc_info:
            validate_availability([{"day": "Someday", "startTime": "9am", "endTime": "17:00"}])

        errors = exc_info.value.details["slots"][0]["errors"]
        assert "unrecognized day" in errors
        assert "startTime must be HH:MM" in errors

    def test_prepare_canonicalizes_and_dedupes(self):
        raw = [
            {"day": "monday", "startTime": "09:00", "endTime": "12:00"},
            {"day": "Monday", "startTime": "09:00", "endTime": "12:00"},
            "Friday",
        ]

        assert prepare_for_submission(raw) == [
            {"day": "Monday", "startTime": "09:00", "endTime": "12:00"},
            {"day": "Friday", **DEFAULT},
        ]

    def test_prepare_zero_pads_times(self):
        result = prepare_for_submission([{"day": "Monday", "startTime": "9:00", "endTime": "9:30"}])

        assert result == [{"day": "Monday", "startTime": "09:00", "endTime": "09:30"}]

    def test_padding_happens_before_dedupe(self):
        raw = [
            {"day": "Monday", "startTime": "9:00", "endTime": "12:00"},
            {"day": "Monday", "startTime": "09:00", "endTime": "12:00"},
        ]

        assert prepare_for_submission(raw) == [{"day": "Monday", "startTime": "09:00", "endTime": "12:00"}]

    def test_prepare_rejects_empty_day(self):
        with pytest.raises(AvailabilityValidationError):
            prepare_for_submission([{"startTime": "09:00", "endTime": "10:00"}])

    def test_dedupe_keeps_first_occurrence(self):
        slots = [{"day": "Monday", **DEFAULT}, {"day": "Tuesday", **DEFAULT}, {"day": "Monday", **DEFAULT}]

        assert dedupe_slots(slots) == slots[:2]


class TestProfileAdapter:
    def test_snake_case_times(self):
        profile = {"availability": [{"day": "Monday", "start_time": "08:00", "end_time": "12:00"}]}

        assert availability_from_profile(profile) == [
            {"day": "Monday", "startTime": "08:00", "endTime": "12:00"}
        ]

    def test_legacy_available_days(self):
        profile = {"availability": [], "availableDays": ["Tuesday"]}

        assert availability_from_profile(profile) == [{"day": "Tuesday", **DEFAULT}]

    def test_missing_profile(self):
        assert availability_from_profile(None) == []

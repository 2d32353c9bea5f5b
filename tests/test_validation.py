"""Tests for response validation and the response models."""

import pytest
from hypothesis import given, strategies as st

from fightcade_api import (
    Country,
    Event,
    Game,
    Player,
    Rank,
    RemoteError,
    Replay,
    ResultsCountCheck,
    SchemaValidationError,
    User,
    country_name,
)
from fightcade_api.services.validation import (
    check_status,
    extract_object,
    extract_results,
    extract_video_urls,
)


def page(results: list, count: int | None = None) -> dict:
    return {"res": "OK", "results": {"results": results, "count": len(results) if count is None else count}}


class TestStatus:

    def test_ok_with_res_key(self) -> None:
        assert check_status({"res": "OK"}) == {"res": "OK"}

    def test_ok_with_status_key(self) -> None:
        assert check_status({"status": "OK"}) == {"status": "OK"}

    def test_user_not_found(self) -> None:
        with pytest.raises(RemoteError) as exc_info:
            check_status({"res": "user not found"}, "getuser")
        assert exc_info.value.status == "user not found"
        assert exc_info.value.is_user_not_found
        assert exc_info.value.operation == "getuser"

    def test_other_error_status(self) -> None:
        with pytest.raises(RemoteError) as exc_info:
            check_status({"res": "invalid request"})
        assert not exc_info.value.is_user_not_found

    @pytest.mark.parametrize("data", [[], "OK", None, {"user": {}}])
    def test_malformed_envelope(self, data) -> None:
        with pytest.raises(SchemaValidationError):
            check_status(data)

    def test_status_must_be_text(self) -> None:
        with pytest.raises(SchemaValidationError) as exc_info:
            check_status({"res": 200})
        assert exc_info.value.path == "res"


class TestObjects:

    def test_user(self, user_data) -> None:
        user = extract_object({"res": "OK", "user": user_data}, "user", User)
        assert user.name == "biggs"
        assert user.gameinfo["umk3"].rank is Rank.S
        assert user.gameinfo["sfiii3nr1"].rank is None

    def test_minimal_user(self) -> None:
        user = extract_object(
            {"status": "OK", "user": {"name": "biggs", "ranked": True, "date": 1600000000000}},
            "user",
            User,
        )
        assert user.name == "biggs"
        assert user.gameinfo is None
        assert user.gravatar is None

    def test_game_passes_opaque_fields_through(self, game_data) -> None:
        game = extract_object({"res": "OK", "game": game_data}, "game", Game)
        assert game.romof == "umk3r10"
        assert game.available_for == 2
        assert game.genres == ["fighting", "versus"]

    def test_missing_payload(self) -> None:
        with pytest.raises(SchemaValidationError) as exc_info:
            extract_object({"res": "OK"}, "game", Game)
        assert exc_info.value.path == "game"

    def test_missing_field_reports_path(self, user_data) -> None:
        del user_data["date"]
        with pytest.raises(SchemaValidationError) as exc_info:
            extract_object({"res": "OK", "user": user_data}, "user", User)
        assert exc_info.value.path == "user.date"
        assert exc_info.value.errors

    def test_no_type_coercion(self, user_data) -> None:
        user_data["ranked"] = "true"
        with pytest.raises(SchemaValidationError) as exc_info:
            extract_object({"res": "OK", "user": user_data}, "user", User)
        assert exc_info.value.path == "user.ranked"

    @pytest.mark.parametrize("rank", [7, -1, "S", True, 5.5, 7.0])
    def test_invalid_rank(self, user_data, rank) -> None:
        user_data["gameinfo"]["umk3"]["rank"] = rank
        with pytest.raises(SchemaValidationError) as exc_info:
            extract_object({"res": "OK", "user": user_data}, "user", User)
        assert exc_info.value.path.startswith("user.gameinfo.umk3.rank")

    def test_integral_float_rank(self, user_data) -> None:
        user_data["gameinfo"]["umk3"]["rank"] = 6.0
        user = extract_object({"res": "OK", "user": user_data}, "user", User)
        assert user.gameinfo["umk3"].rank is Rank.S

    def test_unknown_fields_are_kept(self, event_data) -> None:
        event_data["prize"] = "glory"
        event = extract_object({"res": "OK", "event": event_data}, "event", Event)
        assert event.model_dump()["prize"] == "glory"


class TestResults:

    def test_replays(self, replay_data) -> None:
        replays = extract_results(page([replay_data]), Replay)
        assert [replay.quarkid for replay in replays] == ["1638725293444-1085"]
        assert [player.name for player in replays[0].players] == ["biggs", "rival"]

    def test_empty_results(self) -> None:
        assert extract_results(page([]), Event) == []

    def test_count_mismatch_is_rejected(self, event_data) -> None:
        with pytest.raises(SchemaValidationError) as exc_info:
            extract_results(page([event_data], count=2), Event)
        assert exc_info.value.path == "results.count"

    def test_legacy_off_by_one_count(self, event_data) -> None:
        events = extract_results(page([event_data], count=2), Event, count_check=ResultsCountCheck.LEGACY_OFF_BY_ONE)
        assert len(events) == 1
        with pytest.raises(SchemaValidationError):
            extract_results(page([event_data]), Event, count_check=ResultsCountCheck.LEGACY_OFF_BY_ONE)

    def test_ignored_count(self, event_data) -> None:
        events = extract_results(page([event_data], count=5000), Event, count_check=ResultsCountCheck.IGNORE)
        assert len(events) == 1

    def test_invalid_element_reports_index(self, replay_data) -> None:
        replay_data["players"][1]["country"] = 1
        with pytest.raises(SchemaValidationError) as exc_info:
            extract_results(page([replay_data]), Replay)
        assert exc_info.value.path.startswith("results.results.0.players.1.country")

    def test_remote_error_before_payload(self) -> None:
        with pytest.raises(RemoteError):
            extract_results({"res": "error"}, Replay)


class TestCountry:

    def test_both_shapes_validate(self, player_data) -> None:
        as_object = Player.model_validate(player_data)
        as_text = Player.model_validate({**player_data, "country": "US"})

        assert isinstance(as_object.country, Country)
        assert as_object.country.iso_code == "US"
        assert as_text.country == "US"

    def test_display_name(self, player_data) -> None:
        assert Player.model_validate(player_data).country_name == "United States"
        assert Player.model_validate({**player_data, "country": "US"}).country_name == "US"
        assert country_name(Country(iso_code="BR", full_name="Brazil")) == "Brazil"

    def test_incomplete_country_object(self, player_data) -> None:
        with pytest.raises(ValueError):
            Player.model_validate({**player_data, "country": {"iso_code": "US"}})


class TestReplayRanked:

    @pytest.mark.parametrize("ranked, first_to, cancelled", [
        (3, 3, False),
        ("cancelled", None, True),
        (None, None, False),
    ])
    def test_shapes(self, replay_data, ranked, first_to, cancelled) -> None:
        replay = Replay.model_validate({**replay_data, "ranked": ranked})
        assert replay.first_to == first_to
        assert replay.is_cancelled is cancelled

    def test_absent(self, replay_data) -> None:
        del replay_data["ranked"]
        assert Replay.model_validate(replay_data).ranked is None

    def test_other_text_is_rejected(self, replay_data) -> None:
        with pytest.raises(ValueError):
            Replay.model_validate({**replay_data, "ranked": "ft3"})


def test_rank_labels() -> None:
    assert Rank(0).label == "Unranked"
    assert Rank.S.label == "S"
    assert [rank.label for rank in Rank] == ["Unranked", "E", "D", "C", "B", "A", "S"]


class TestVideoURLs:

    def test_flat_mapping(self) -> None:
        assert extract_video_urls({"a": "https://video/a"}) == {"a": "https://video/a"}

    def test_empty_mapping(self) -> None:
        assert extract_video_urls({}) == {}

    @pytest.mark.parametrize("data", [["a"], {"a": 1}, None])
    def test_malformed(self, data) -> None:
        with pytest.raises(SchemaValidationError):
            extract_video_urls(data)


numbers = st.one_of(
    st.integers(min_value=0, max_value=2**53),
    st.floats(min_value=0, max_value=1e12, allow_nan=False, allow_infinity=False),
)
game_stats = st.fixed_dictionaries({
    "rank": st.integers(min_value=0, max_value=6),
    "num_matches": numbers,
    "last_match": numbers,
    "time_played": numbers,
})
countries = st.one_of(
    st.text(max_size=30),
    st.fixed_dictionaries({"iso_code": st.text(max_size=2), "full_name": st.text(max_size=30)}),
)
players = st.fixed_dictionaries({
    "name": st.text(max_size=20),
    "country": countries,
    "rank": st.integers(min_value=0, max_value=6),
    "score": numbers,
    "gameinfo": st.dictionaries(st.text(min_size=1, max_size=10), game_stats, max_size=3),
})
replays = st.fixed_dictionaries({
    "quarkid": st.text(min_size=1, max_size=30),
    "channelname": st.text(max_size=30),
    "date": numbers,
    "duration": numbers,
    "emulator": st.sampled_from(["fbneo", "flycast", "snes9x", "ggpofba"]),
    "gameid": st.text(min_size=1, max_size=20),
    "num_matches": numbers,
    "players": st.lists(players, max_size=3),
    "ranked": st.one_of(numbers, st.just("cancelled")),
    "replay_file": st.text(max_size=30),
    "realtime_views": numbers,
    "saved_views": numbers,
})


@given(replays)
def test_replay_validation_preserves_every_field(data: dict) -> None:
    """A fully populated replay comes out of validation unchanged."""
    replay = Replay.model_validate(data)
    assert replay.model_dump() == data
    assert type(replay.date) is type(data["date"])
    assert type(replay.ranked) is type(data["ranked"])

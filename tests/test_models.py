"""Tests for cypher_character.models."""

import pytest
from pydantic import ValidationError

from cypher_character.models import Character, Sentence


def _ferris(flavor: str | None = "Technology") -> Character:
    return Character(
        name="Ferris",
        pronouns="any",
        sentence=Sentence(
            descriptor="Fast",
            character_type="Explorer",
            flavor=flavor,
            focus="Helps Their Friends",
        ),
    )


class TestSentence:
    def test_renders_with_flavor(self) -> None:
        s = Sentence(descriptor="Impulsive", character_type="Explorer",
                     flavor="Combat", focus="Sailed Beneath The Jolly Roger")
        assert str(s) == "Impulsive Explorer (Combat) who Sailed Beneath The Jolly Roger"

    def test_renders_without_flavor(self) -> None:
        s = Sentence(descriptor="Strong", character_type="Warrior", focus="Bears a Halo of Fire")
        assert str(s) == "Strong Warrior who Bears a Halo of Fire"

    def test_flavor_defaults_to_none(self) -> None:
        s = Sentence(descriptor="a", character_type="b", focus="c")
        assert s.flavor is None

    def test_missing_focus_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Sentence(descriptor="Fast", character_type="Explorer")


class TestCharacter:
    def test_renders_as_sentence(self) -> None:
        assert str(_ferris()) == "Ferris (any) is a Fast Explorer (Technology) who Helps Their Friends"

    def test_renders_without_flavor(self) -> None:
        assert str(_ferris(flavor=None)) == "Ferris (any) is a Fast Explorer who Helps Their Friends"

    def test_renders_quotes_verbatim(self) -> None:
        c = Character(
            name='Lt. Commander Jane "JJ" Jones',
            pronouns="she/her",
            sentence=Sentence(descriptor="Impulsive", character_type="Explorer",
                              flavor="Combat", focus="Sailed Beneath The Jolly Roger"),
        )
        expected = (
            'Lt. Commander Jane "JJ" Jones (she/her) is a Impulsive Explorer (Combat) '
            "who Sailed Beneath The Jolly Roger"
        )
        assert str(c) == expected

    def test_serialise_roundtrip(self) -> None:
        c = _ferris()
        restored = Character.model_validate_json(c.model_dump_json())
        assert restored == c

    def test_absent_flavor_roundtrips_as_none(self) -> None:
        c = _ferris(flavor=None)
        dumped = c.model_dump()
        assert dumped["sentence"]["flavor"] is None
        restored = Character.model_validate(dumped)
        assert restored.sentence.flavor is None

    def test_nesting_matches_field_names(self) -> None:
        dumped = _ferris().model_dump()
        assert set(dumped) == {"name", "pronouns", "sentence"}
        assert set(dumped["sentence"]) == {"descriptor", "character_type", "flavor", "focus"}

"""Descriptive character model.

A character is a name, pronouns and a Cypher System sentence
("I am an <adjective> <noun> who <verbs>"). These models carry no rules;
they only know how to render themselves for display.
"""

from __future__ import annotations

from pydantic import BaseModel


class Sentence(BaseModel):
    """The high-level description of a character.

    descriptor is the adjective, character_type the noun (Warrior, Adept,
    Explorer, Speaker in the base rules), flavor an optional modifier on the
    type and focus the verb.
    """

    descriptor: str
    character_type: str
    flavor: str | None = None
    focus: str

    def __str__(self) -> str:
        flavor = f" ({self.flavor})" if self.flavor is not None else ""
        return f"{self.descriptor} {self.character_type}{flavor} who {self.focus}"


class Character(BaseModel):
    """Entry point to the descriptive model."""

    name: str
    pronouns: str
    sentence: Sentence

    def __str__(self) -> str:
        return f"{self.name} ({self.pronouns}) is a {self.sentence}"

import pytest
from pydantic import ValidationError

from questpatterns.domain.combatants import Caster, Fighter, MagicUser, WeaponUser


@pytest.fixture
def dursal(sink):
    return Fighter(name="Dursal", weapon="axe", hp=100, atk=10, defense=10, sink=sink)


@pytest.fixture
def myrin(sink):
    return Caster(name="Myrin", element="lightning", hp=100, mp=10, mag=10, defense=10, sink=sink)


def test_fighter_is_weapon_user(dursal):
    assert isinstance(dursal, WeaponUser)
    assert not isinstance(dursal, MagicUser)


def test_fighter_attack_and_guard(dursal, sink):
    dursal.perform_attack()
    dursal.perform_guard()

    assert sink.lines == [
        "Dursal attacks with a axe for 10 damage.",
        "Dursal guards, reducing the damage.",
    ]


def test_caster_spell_and_shield(myrin, sink):
    myrin.cast_spell()
    myrin.cast_shield()

    assert sink.lines == [
        "Myrin casts lightning for 10 damage.",
        "Myrin casts a shield, neutralizing the damage.",
    ]


def test_def_alias_is_accepted(sink):
    fighter = Fighter(**{"name": "Brom", "weapon": "mace", "hp": 80, "atk": 7, "def": 4, "sink": sink})
    assert fighter.defense == 4


def test_negative_stats_rejected(sink):
    with pytest.raises(ValidationError) as exc:
        Caster(name="Myrin", element="fire", hp=-1, mp=10, mag=10, defense=10, sink=sink)
    assert "hp" in str(exc.value)


def test_empty_name_rejected(sink):
    with pytest.raises(ValidationError):
        Fighter(name="", weapon="axe", hp=100, atk=10, defense=10, sink=sink)


def test_sink_must_be_a_narrative_sink():
    with pytest.raises(ValidationError):
        Fighter(name="Dursal", weapon="axe", hp=100, atk=10, defense=10, sink=print)


def test_sink_excluded_from_dump(dursal):
    dumped = dursal.model_dump(by_alias=True)
    assert "sink" not in dumped
    assert dumped["def"] == 10

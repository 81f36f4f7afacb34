"""Unit tests for the Animal and Room entities and derived read models."""

from datetime import date

from zoo_app.domain.entities import Animal, AnimalPage, Room


def _lion() -> Animal:
    return Animal(title="Lion", located=date(2024, 5, 1))


def test_animal_update_ignores_none_fields():
    animal = _lion()
    animal.place_in("r1")
    before = animal.updated_at

    animal.update(title="King")

    assert animal.title == "King"
    assert animal.located == date(2024, 5, 1)
    assert animal.current_room_id == "r1"
    assert animal.updated_at >= before


def test_animal_favourites_have_set_semantics():
    animal = _lion()
    animal.add_favourite("r1")
    animal.add_favourite("r1")
    animal.add_favourite("r2")
    assert animal.favourite_room_ids == {"r1", "r2"}

    animal.remove_favourite("r1")
    assert not animal.is_favourite("r1")
    assert animal.is_favourite("r2")


def test_clear_room():
    animal = _lion()
    animal.place_in("r1")
    animal.clear_room()
    assert animal.current_room_id is None


def test_room_rename_refreshes_timestamp():
    room = Room(title="Old")
    before = room.updated_at
    room.rename("New")
    assert room.title == "New"
    assert room.updated_at >= before


def test_animal_page_total_pages():
    assert AnimalPage(items=[], page=0, size=10, total_elements=0).total_pages == 0
    assert AnimalPage(items=[], page=0, size=10, total_elements=10).total_pages == 1
    assert AnimalPage(items=[], page=0, size=10, total_elements=11).total_pages == 2
    assert AnimalPage(items=[], page=0, size=3, total_elements=7).total_pages == 3

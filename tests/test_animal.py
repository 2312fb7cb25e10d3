from zoo.core.animal import AnimalSnapshot, AnimalState, Polarity


def test_animal_state_accepts_any_name():
    animal = AnimalState("", is_sleeping=False)
    assert animal.name == ""
    assert animal.is_sleeping is False


def test_nocturnal_sleeps_by_day():
    assert Polarity.NOCTURNAL.is_sleeping(True) is True
    assert Polarity.NOCTURNAL.is_sleeping(False) is False


def test_diurnal_sleeps_by_night():
    assert Polarity.DIURNAL.is_sleeping(True) is False
    assert Polarity.DIURNAL.is_sleeping(False) is True


def test_snapshot_is_detached_from_state():
    animal = AnimalState("Racoon", is_sleeping=True)
    snap = AnimalSnapshot.of(animal)
    animal.is_sleeping = False
    assert snap.is_sleeping is True
    assert snap.to_dict() == {"name": "Racoon", "is_sleeping": True}

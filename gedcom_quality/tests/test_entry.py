import pytest
from gedcom_quality import Entry, Family, Name, Person


def make_entry(order=(1, 2, 3, 4, 5)):
    people = {
        1: Person(1, name=Name("John", "Smith")),
        2: Person(2, name=Name("Mary", "Smith")),
        3: Person(3, name=Name("Anna", "Smith")),
        4: Person(4, name=Name("Peter", "Smith")),
        5: Person(5, name=Name("Hans", "Meier")),
    }
    entry = Entry("E1")
    for person_id in order:
        entry.add_person(people[person_id])
    entry.add_family(Family(10, husband=1, wife=2, children=[3, 4]))
    return entry


class TestEntry:
    """Tests for Entry bookkeeping."""

    def test_add_person(self):
        entry = Entry("E1")
        assert entry.is_empty()
        assert entry.add_person(Person(1))
        assert not entry.add_person(Person(1))
        assert len(entry) == 1
        assert entry.get_person(1).xref_id == 1
        assert entry.get_person(2) is None

    def test_add_person_wrong_type(self):
        with pytest.raises(TypeError):
            Entry("E1").add_person("John Smith")

    def test_add_family_wrong_type(self):
        with pytest.raises(TypeError):
            Entry("E1").add_family({'husband': 1})

    @pytest.mark.parametrize("entry_id", [5, None, b"E1"])
    def test_entry_id_must_be_str(self, entry_id):
        with pytest.raises(TypeError):
            Entry(entry_id)

    def test_add_family_links_members(self):
        entry = make_entry()
        assert entry.people[1].families == [10]
        assert entry.people[3].families == [10]
        assert entry.people[5].families == []
        assert not entry.add_family(Family(10))

    def test_summary(self):
        assert make_entry().summary() == {'id': 'E1', 'people_count': 5, 'families_count': 1}


class TestRelationships:
    """Tests for relationship labels."""

    def test_computed_from_husband(self):
        entry = make_entry()
        assert [entry.relationship(pid) for pid in (1, 2, 3, 4, 5)] == ['0', '0W', '0C', '0C', '1']

    def test_computed_from_child(self):
        entry = make_entry(order=(3, 1, 2, 4, 5))
        assert [entry.relationship(pid) for pid in (3, 1, 2, 4, 5)] == ['0', '0F', '0M', '0S', '1']

    def test_computed_from_wife(self):
        entry = make_entry(order=(2, 1, 3, 4, 5))
        assert entry.relationship(2) == '0'
        assert entry.relationship(1) == '0H'
        assert entry.relationship(3) == '0C'

    def test_external_label_wins(self):
        entry = make_entry()
        entry.set_relationship(2, '3W')
        assert entry.relationship(2) == '3W'
        assert entry.get_relationship(1) == '0'

    def test_label_given_on_add(self):
        entry = Entry("E1")
        entry.add_person(Person(1), relationship='2C')
        assert entry.relationship(1) == '2C'

    def test_unknown_person(self):
        assert make_entry().relationship(99) == ''

    def test_labels_follow_changes(self):
        entry = make_entry()
        assert entry.relationship(5) == '1'
        entry.add_family(Family(11, husband=5, wife=3))
        assert entry.relationship(5) == '0CH'


class TestFillSurname:
    """Tests for filling missing surnames from relatives."""

    def test_child_takes_father_surname(self):
        entry = Entry("E1")
        entry.add_person(Person(1, name=Name("John", "Smith")))
        entry.add_person(Person(2, name=Name("Anna", "")))
        entry.add_family(Family(10, husband=1, children=[2]))
        assert entry.fill_surname() == 1
        assert entry.people[2].name.surname == "Smith"

    def test_husband_takes_child_surname(self):
        entry = Entry("E1")
        entry.add_person(Person(1, name=Name("John", "")))
        entry.add_person(Person(2, name=Name("Anna", "Brown")))
        entry.add_family(Family(10, husband=1, children=[2]))
        assert entry.fill_surname() == 1
        assert entry.people[1].name.surname == "Brown"

    def test_filled_person_gets_new_name(self):
        entry = Entry("E1")
        entry.add_person(Person(1, name=Name("John", "Smith")))
        original = Name("Anna", "")
        entry.add_person(Person(2, name=original))
        entry.add_family(Family(10, husband=1, children=[2]))
        entry.fill_surname()
        assert entry.people[2].name == Name("Anna", "Smith")
        assert entry.people[2].name is not original
        assert original.surname == ""

    def test_nothing_to_fill(self):
        assert make_entry().fill_surname() == 0

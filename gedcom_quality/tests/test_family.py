import pytest
from gedcom_quality import Family, LifeEvent


def test_family_init():
    family = Family(1)
    assert family.husband is None
    assert family.wife is None
    assert family.children == []
    assert family.marriage.is_empty()
    assert family.marriage.what == 'marriage'
    assert family.is_empty()
    assert str(family) == '<Empty Family>'


def test_family_id_must_be_int():
    with pytest.raises(TypeError):
        Family("F1")


def test_partners():
    family = Family(1, husband=10, wife=11, children=[12, 13])
    assert family.partners() == [10, 11]
    assert family.is_spouse(10)
    assert not family.is_spouse(12)
    assert family.partner_of(10) == 11
    assert family.partner_of(11) == 10
    assert family.partner_of(12) is None


def test_single_parent():
    family = Family(1, wife=11, children=[12])
    assert family.partners() == [11]
    assert family.partner_of(11) is None


def test_str():
    family = Family(1, husband=10, wife=11, children=[12],
                    marriage=LifeEvent(place="Boston", date="1875"))
    assert str(family) == "Husband: 10, Wife: 11, Children: 1 (12), Married: 1875 Boston"

import pytest

from normref.core.models import NormRef
from normref.parsing.ordering import article_sort_key, dedupe_refs, ref_key, sort_refs


def test_article_sort_key_decimal_aware():
    articles = ["391.1", "104", "391", "1000", "99", "0391.2"]
    assert sorted(articles, key=article_sort_key) == ["99", "104", "391", "391.1", "0391.2", "1000"]


def test_dedupe_collapses_exact_tuples():
    refs = [NormRef("391"), NormRef("391"), NormRef("391", part="1"), NormRef("391", point="1")]
    assert len(dedupe_refs(refs)) == 3


def test_ref_key_separates_fields():
    assert ref_key(NormRef("5", part="1")) != ref_key(NormRef("5", point="1"))
    assert ref_key(NormRef("5", act_number="ՀՕ-1-Ն")) != ref_key(NormRef("5"))


def test_nulls_sort_first():
    refs = [
        NormRef("5", part="1"),
        NormRef("5", act_number="ՀՕ-1-Ն"),
        NormRef("5"),
        NormRef("5", part="1", point="2"),
        NormRef("5", part="10"),
        NormRef("5", part="2"),
    ]
    assert sort_refs(refs) == (
        NormRef("5"),
        NormRef("5", act_number="ՀՕ-1-Ն"),
        NormRef("5", part="1"),
        NormRef("5", part="1", point="2"),
        NormRef("5", part="2"),
        NormRef("5", part="10"),
    )


def test_sort_refs_returns_tuple():
    assert sort_refs([]) == ()


def test_norm_ref_requires_article():
    with pytest.raises(ValueError):
        NormRef(article="")


def test_norm_ref_citation_and_dict():
    ref = NormRef(article="391", part="1", act_number="ՀՕ-528-Ն")
    assert ref.to_citation() == "ՀՕ-528-Ն, հոդված 391, մաս 1"
    assert ref.to_dict() == {"act_number": "ՀՕ-528-Ն", "article": "391", "part": "1", "point": None}

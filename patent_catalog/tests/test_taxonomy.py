from __future__ import annotations

from collections import Counter

from patent_catalog.schemas import DatasetDescriptor, FlatBucket, GroupedBucket, PatentType
from patent_catalog.services import build_taxonomy, group_content_by_type, pair_person_types
from patent_catalog.services.classifier import classify
from patent_catalog.services.taxonomy import split_by_disambiguation


def identifiers(items):
    return [item.identifier for item in items]


def test_empty_input_yields_empty_essentials_only():
    taxonomy = build_taxonomy([])

    assert taxonomy.granted == {"Essentials": FlatBucket()}
    assert taxonomy.pregrant == {"Essentials": FlatBucket()}


def test_items_split_by_patent_type_and_category(taxonomy):
    granted = taxonomy.for_type(PatentType.GRANTED)
    pregrant = taxonomy.for_type(PatentType.PREGRANT)

    assert list(granted)[0] == "Essentials"
    assert identifiers(granted["General"].items) == ["g_patent", "g_application"]
    assert identifiers(granted["Content"].items) == [
        "g_claims_2021",
        "g_claims_2022",
        "g_brf_sum_text_2022",
        "g_detail_desc_text_2021",
    ]
    assert identifiers(pregrant["Legal"].items) == ["pg_rel_app_text"]
    assert "Mapping" not in granted


def test_every_item_lands_in_exactly_one_natural_category(taxonomy, descriptors):
    expected = Counter(classify(descriptor).patent_type for descriptor in descriptors)

    for patent_type in PatentType:
        categories = taxonomy.for_type(patent_type)
        natural = sum(
            bucket.count for name, bucket in categories.items() if name != "Essentials"
        )
        assert natural == expected[patent_type]


def test_essentials_overlay_is_non_exclusive(taxonomy):
    granted = taxonomy.for_type(PatentType.GRANTED)
    essentials = identifiers(granted["Essentials"].items)

    assert essentials == [
        "g_patent",
        "g_application",
        "g_assignee_disambiguated",
        "g_inventor_disambiguated",
        "g_location_disambiguated",
        "g_cpc_at_issue",
        "g_us_patent_citation",
    ]
    assert "g_cpc_at_issue" in identifiers(granted["Classification"].items)
    assert identifiers(taxonomy.pregrant["Essentials"].items) == [
        "pg_published_application",
        "pg_assignee_disambiguated",
    ]


def test_custom_essentials_list(descriptors):
    taxonomy = build_taxonomy(descriptors, essential_identifiers=["pg_abstract"])

    assert taxonomy.granted["Essentials"].items == []
    assert identifiers(taxonomy.pregrant["Essentials"].items) == ["pg_abstract"]


def test_people_and_geography_become_grouped(taxonomy):
    people = taxonomy.granted["People"]
    geography = taxonomy.granted["Geography"]

    assert isinstance(people, GroupedBucket)
    assert identifiers(people.disambiguated) == [
        "g_assignee_disambiguated",
        "g_inventor_disambiguated",
    ]
    assert identifiers(people.raw) == [
        "g_assignee_not_disambiguated",
        "g_inventor_not_disambiguated",
        "g_attorney_not_disambiguated",
    ]
    assert identifiers(people.main) == ["g_persistent_inventor"]

    assert isinstance(geography, GroupedBucket)
    assert geography.main == []
    assert people.count == 6


def test_essentials_stays_flat_even_with_people_files(taxonomy):
    assert isinstance(taxonomy.granted["Essentials"], FlatBucket)


def test_split_keeps_flat_bucket_without_disambiguation_markers():
    items = [classify_id("g_persistent_inventor"), classify_id("g_examiner")]

    bucket = split_by_disambiguation(items)

    assert isinstance(bucket, FlatBucket)
    assert identifiers(bucket.items) == ["g_persistent_inventor", "g_examiner"]


def test_split_groups_when_only_raw_files_exist():
    bucket = split_by_disambiguation([classify_id("g_attorney_not_disambiguated")])

    assert isinstance(bucket, GroupedBucket)
    assert bucket.disambiguated == []
    assert identifiers(bucket.raw) == ["g_attorney_not_disambiguated"]


def test_people_without_markers_stays_flat():
    taxonomy = build_taxonomy([descriptor_for("g_examiner"), descriptor_for("g_lawyer")])

    assert isinstance(taxonomy.granted["People"], FlatBucket)


def test_building_twice_is_identical(descriptors):
    assert build_taxonomy(descriptors) == build_taxonomy(descriptors)


def test_pair_person_types_aligns_roles(taxonomy):
    pairs = pair_person_types(taxonomy.granted["People"])

    assert [pair.role for pair in pairs] == ["Assignee", "Attorney", "Inventor"]
    attorney = pairs[1]
    assert attorney.disambiguated == []
    assert identifiers(attorney.raw) == ["g_attorney_not_disambiguated"]
    inventor = pairs[2]
    assert identifiers(inventor.disambiguated) == ["g_inventor_disambiguated"]
    assert identifiers(inventor.raw) == ["g_inventor_not_disambiguated"]
    assert identifiers(inventor.main) == ["g_persistent_inventor"]


def test_pair_person_types_for_geography_uses_other_role(taxonomy):
    pairs = pair_person_types(taxonomy.granted["Geography"])

    assert [pair.role for pair in pairs] == ["Other"]
    assert len(pairs[0].disambiguated) == 1
    assert len(pairs[0].raw) == 1


def test_group_content_by_type_uses_fixed_order(taxonomy):
    groups = group_content_by_type(taxonomy.granted["Content"].items)

    assert [group.content_type for group in groups] == [
        "Brief Summary",
        "Claims",
        "Detailed Description",
    ]
    assert identifiers(groups[1].items) == ["g_claims_2021", "g_claims_2022"]


def test_group_content_by_type_puts_untyped_items_under_other():
    groups = group_content_by_type([classify_id("g_patent"), classify_id("g_claims_2020")])

    assert [group.content_type for group in groups] == ["Claims", "Other"]


def descriptor_for(identifier):
    return DatasetDescriptor(identifier=identifier)


def classify_id(identifier):
    return classify(descriptor_for(identifier))


def test_build_taxonomy_tolerates_extras_named_like_derived_fields():
    taxonomy = build_taxonomy(
        [
            DatasetDescriptor.model_validate({"table_name": "g_claims_2020", "year": "2020"}),
            DatasetDescriptor.model_validate({"table_name": "g_patent", "category": "Bulk"}),
        ]
    )

    assert identifiers(taxonomy.granted["Content"].items) == ["g_claims_2020"]
    assert identifiers(taxonomy.granted["General"].items) == ["g_patent"]
    assert "Bulk" not in taxonomy.granted

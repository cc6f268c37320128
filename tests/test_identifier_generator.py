import pytest

from c4dsl.dsl.errors import IdentifierSpaceExhausted, UnknownIdentifierReference
from c4dsl.dsl.identifiers import IdentifierGenerator, acronym, assign_identifiers
from c4dsl.models import Component, Container, ContainerType, Person, SoftwareSystem


def _container(name, **kwargs):
    return Container(name=name, description="A container", container_type=ContainerType.API, **kwargs)


def test_acronym_takes_first_letter_of_each_word():
    assert acronym("User") == "u"
    assert acronym("API") == "a"
    assert acronym("Software System") == "ss"
    assert acronym("Code  Element\tType") == "cet"
    assert acronym("User's System") == "us"


def test_collisions_take_increasing_suffixes_in_order():
    generator = IdentifierGenerator()
    assert [generator.next_identifier("x") for _ in range(3)] == ["x", "x1", "x2"]


def test_suffix_skips_identifiers_already_taken():
    generator = IdentifierGenerator()
    generator.next_identifier("u1")
    assert generator.next_identifier("u") == "u"
    assert generator.next_identifier("u") == "u2"


def test_exhausted_identifier_space_raises():
    generator = IdentifierGenerator(max_suffix=2)
    for _ in range(3):
        generator.next_identifier("a")
    with pytest.raises(IdentifierSpaceExhausted) as excinfo:
        generator.next_identifier("a")
    assert excinfo.value.candidate == "a"


def test_three_elements_with_same_acronym():
    people = [
        Person(name="Xavier", description="First"),
        Person(name="Xena", description="Second"),
        Person(name="Xerxes", description="Third"),
    ]
    identifiers = assign_identifiers(people)
    assert [node.identifier for node in identifiers.roots] == ["x", "x1", "x2"]


def test_paths_join_ancestor_identifiers():
    user = Person(name="User", description="A user")
    system = SoftwareSystem(
        name="Software System",
        description="The system",
        containers=[_container("Web App", components=[Component(name="Sign In", description="Auth")])],
    )
    identifiers = assign_identifiers([user, system])

    assert identifiers.roots[0].path == "u"
    assert identifiers.roots[1].path == "ss"
    assert identifiers.roots[1].children[0].path == "ss.wa"
    assert identifiers.roots[1].children[0].children[0].path == "ss.wa.si"
    assert list(identifiers.by_path) == ["u", "ss", "ss.wa", "ss.wa.si"]


def test_uniqueness_is_global_across_nesting_levels():
    system = SoftwareSystem(
        name="Catalog",
        description="Catalog system",
        containers=[_container("Cache"), _container("Core", components=[Component(name="Crawler", description="x")])],
    )
    identifiers = assign_identifiers([system])
    assert list(identifiers.by_path) == ["c", "c.c1", "c.c2", "c.c2.c3"]


def test_explicit_identifier_replaces_acronym():
    system = SoftwareSystem(name="API", description="Backend", identifier="api", containers=[_container("Web App")])
    identifiers = assign_identifiers([system])
    assert identifiers.roots[0].identifier == "api"
    assert identifiers.roots[0].children[0].path == "api.wa"


def test_resolve_accepts_paths_and_bare_identifiers():
    system = SoftwareSystem(name="API", description="Backend", containers=[_container("Web App")])
    identifiers = assign_identifiers([system])
    assert identifiers.resolve("a.wa", "test") == "a.wa"
    assert identifiers.resolve("wa", "test") == "a.wa"
    assert identifiers.lookup("a").path == "a"
    assert len(identifiers) == 2


def test_resolve_unknown_reference():
    identifiers = assign_identifiers([Person(name="User", description="A user")])
    with pytest.raises(UnknownIdentifierReference) as excinfo:
        identifiers.resolve("ghost", "relationship 'Uses'")
    assert excinfo.value.reference == "ghost"


def test_assignment_is_deterministic():
    def build():
        return [
            Person(name="User", description="A user"),
            SoftwareSystem(name="Upload Service", description="x", containers=[_container("Uploader")]),
        ]

    first = list(assign_identifiers(build()).by_path)
    second = list(assign_identifiers(build()).by_path)
    assert first == second == ["u", "us", "us.u1"]


def test_acronym_skips_punctuation():
    assert acronym("{Legacy} Gateway") == "lg"
    assert acronym('"Power" User') == "pu"
    assert acronym(".NET Backend") == "nb"
    assert acronym("Über 3D Viewer") == "b3v"
    assert acronym("--- ***") == ""


def test_name_without_letters_falls_back_to_element_type():
    people = [Person(name="???", description="Unknown"), Person(name="!!!", description="Also unknown")]
    system = SoftwareSystem(name="{ }", description="Braces", containers=[_container("...")])
    identifiers = assign_identifiers([*people, system])
    assert list(identifiers.by_path) == ["p", "p1", "s", "s.c"]


def test_paths_from_punctuated_names_are_well_formed():
    system = SoftwareSystem(name=".NET Services", description="x", containers=[_container(".NET Backend")])
    identifiers = assign_identifiers([system])
    assert list(identifiers.by_path) == ["ns", "ns.nb"]

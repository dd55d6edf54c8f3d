import logging

import pytest

from pojogen import (
    GenerationProfile,
    InvalidArgumentError,
    ProfileOption,
    Struct,
    StructAttribute,
    create_generator,
    generate_code,
    quick_generate,
)
from pojogen.generator import (
    TemplateEngine,
    accessor_name,
    capitalize_first,
    create_template_engine,
    mutator_name,
)
from pojogen.generator.naming import is_reserved_word

PERSON_SOURCE = "\n".join(
    [
        "  public class Person {",
        "  ",
        "    private final long id;",
        "    private string name;",
        "    private Address address;",
        "  ",
        "    public Person(final long id, final string name, final Address address) {",
        "      this.id = id;",
        "      this.name = name;",
        "      this.address = address;",
        "    }",
        "  ",
        "    public long getId() {",
        "      return this.id;",
        "    }",
        "  ",
        "    public string getName() {",
        "      return this.name;",
        "    }",
        "  ",
        "    public Address getAddress() {",
        "      return this.address;",
        "    }",
        "  ",
        "    @Override",
        "    public boolean equals(final Object other) {",
        "      if (this == other) {",
        "        return true;",
        "      }",
        "      if (!(other instanceof Person)) {",
        "        return false;",
        "      }",
        "      final Person that = (Person) other;",
        "      return java.util.Objects.equals(this.id, that.id)"
        " && java.util.Objects.equals(this.name, that.name)"
        " && java.util.Objects.equals(this.address, that.address);",
        "    }",
        "  ",
        "    @Override",
        "    public int hashCode() {",
        "      return java.util.Objects.hash(this.id, this.name, this.address);",
        "    }",
        "  ",
        "    @Override",
        "    public String toString() {",
        '      return "Person{id=" + this.id + ", name=" + this.name'
        ' + ", address=" + this.address + "}";',
        "    }",
        "  }",
    ]
)


def _person() -> Struct:
    return (
        Struct.new_builder()
        .with_name("Person")
        .add_attribute(StructAttribute.create("id", "long", True))
        .add_attribute(StructAttribute.create("name", "string", False))
        .add_attribute(StructAttribute.create("address", "Address", False))
        .create()
    )


def _profile(auxiliary_lines=(), **options: str) -> GenerationProfile:
    return GenerationProfile.create(
        auxiliary_lines, {key.replace("_", "-"): value for key, value in options.items()}
    )


def test_person_class_matches_expected_source() -> None:
    code = create_generator().generate(_person(), _profile(line_prefix="  "))

    assert code == PERSON_SOURCE


def test_every_line_carries_the_prefix() -> None:
    code = create_generator().generate(
        _person(), _profile(["import java.util.Objects;"], line_prefix="\t")
    )

    assert all(line.startswith("\t") for line in code.split("\n"))


def test_generation_is_deterministic() -> None:
    generator = create_generator()
    profile = _profile(["// generated"], line_prefix="  ", generate_setters="true")

    assert generator.generate(_person(), profile) == generator.generate(_person(), profile)
    assert create_generator().generate(_person(), profile) == generator.generate(
        _person(), profile
    )


def test_equal_structs_from_different_paths_generate_identical_code() -> None:
    factory_made = Struct.create(
        "Person",
        [
            StructAttribute.create("id", "long", True),
            StructAttribute.create("name", "string", False),
            StructAttribute.create("address", "Address", False),
        ],
    )
    profile = _profile(line_prefix="  ")
    generator = create_generator()

    assert factory_made == _person()
    assert generator.generate(factory_made, profile) == generator.generate(
        Struct.copy_of(_person()), profile
    )


def test_immutable_struct_is_declared_final() -> None:
    point = Struct.create(
        "Point",
        [StructAttribute.create("x", "int", True), StructAttribute.create("y", "int", True)],
    )
    code = create_generator().generate(point, _profile())

    assert code.split("\n")[0] == "public final class Point {"
    assert "private final int x;" in code


def test_constant_struct_is_final_but_keeps_attribute_flags() -> None:
    struct = Struct.create("Person", list(_person().attributes), True)
    code = create_generator().generate(struct, _profile(generate_setters="true"))

    assert code.split("\n")[0] == "public final class Person {"
    assert "private string name;" in code
    assert "setName" not in code


def test_zero_attributes_generate_no_argument_class() -> None:
    code = create_generator().generate(Struct.create("Empty"), _profile(line_prefix="\t"))
    lines = code.split("\n")

    assert lines[0] == "\tpublic final class Empty {"
    assert "\t\tpublic Empty() {" in lines
    assert "private" not in code
    assert "\t\t\treturn true;" in lines
    assert "\t\t\treturn java.util.Objects.hash();" in lines
    assert '\t\t\treturn "Empty{}";' in lines
    assert lines[-1] == "\t}"


def test_fields_follow_attribute_order() -> None:
    struct = (
        Struct.new_builder()
        .with_name("Ordered")
        .with_attributes([StructAttribute.create("zeta", "int")])
        .add_attribute(StructAttribute.create("alpha", "int"))
        .add_attribute(StructAttribute.create("mid", "int"))
        .create()
    )
    code = create_generator().generate(struct, _profile())

    positions = [code.index(f"private int {name};") for name in ("zeta", "alpha", "mid")]
    assert positions == sorted(positions)
    assert "public Ordered(final int zeta, final int alpha, final int mid) {" in code


def test_package_and_auxiliary_lines_precede_class() -> None:
    code = create_generator().generate(
        _person(),
        _profile(
            ["import java.util.List;", "import java.util.Map;"],
            line_prefix="  ",
            package_name="com.example",
        ),
    )
    lines = code.split("\n")

    assert lines[:5] == [
        "  package com.example;",
        "  ",
        "  import java.util.List;",
        "  import java.util.Map;",
        "  ",
    ]
    assert lines[5] == "  public class Person {"


def test_setters_are_emitted_for_non_constant_attributes_only() -> None:
    code = create_generator().generate(_person(), _profile(generate_setters="true"))

    assert "public void setName(final string name) {" in code
    assert "public void setAddress(final Address address) {" in code
    assert "setId" not in code


def test_accessor_prefix_and_comments_are_configurable() -> None:
    code = create_generator().generate(
        _person(), _profile(accessor_prefix="fetch", generate_comments="yes")
    )

    assert "public long fetchId() {" in code
    assert code.startswith("/**\n * Value object Person.")
    assert " * <p>Instances of this class are mutable." in code


def test_line_separator_option_joins_lines() -> None:
    code = create_generator().generate(_person(), _profile(line_separator="\r\n"))

    assert "\r\n" in code
    assert "\n" not in code.replace("\r\n", "")


def test_unknown_options_have_no_effect() -> None:
    generator = create_generator()

    assert generator.generate(_person(), _profile(brace_style="allman")) == generator.generate(
        _person(), _profile()
    )


def test_type_names_are_emitted_verbatim() -> None:
    struct = Struct.create(
        "Inventory", [StructAttribute.create("items", "java.util.List<Item>", True)]
    )
    code = create_generator().generate(struct, _profile())

    assert "private final java.util.List<Item> items;" in code
    assert "public java.util.List<Item> getItems() {" in code


def test_generate_rejects_missing_arguments() -> None:
    generator = create_generator()

    with pytest.raises(InvalidArgumentError):
        generator.generate(None, _profile())
    with pytest.raises(InvalidArgumentError):
        generator.generate(_person(), None)
    with pytest.raises(InvalidArgumentError):
        generator.generate("Person", _profile())
    with pytest.raises(InvalidArgumentError):
        generator.generate(_person(), {"line-prefix": "  "})


def test_duplicate_attributes_are_emitted_and_reported(caplog) -> None:
    struct = Struct.create(
        "Pair",
        [StructAttribute.create("value", "int"), StructAttribute.create("value", "long")],
    )
    generator = create_generator()

    with caplog.at_level(logging.WARNING, logger="pojogen"):
        code = generator.generate(struct, _profile())

    assert "private int value;" in code
    assert "private long value;" in code
    assert generator.validate_struct(struct) == ["Attribute 'value' is declared 2 times in Pair"]
    assert "declared 2 times" in caplog.text


def test_reserved_words_are_reported() -> None:
    struct = Struct.create("class", [StructAttribute.create("int", "int")])

    warnings = create_generator().validate_struct(struct)

    assert len(warnings) == 2


def test_generate_code_bundles_metadata() -> None:
    result = generate_code(create_generator(), _person(), _profile(line_prefix="  "))

    assert result.code == PERSON_SOURCE
    assert result.warnings == []
    assert result.metadata == {
        "language": "java",
        "file_extension": ".java",
        "class_name": "Person",
        "attribute_count": 3,
        "immutable": False,
    }


def test_quick_generate_accepts_keyword_options() -> None:
    assert quick_generate(_person(), line_prefix="  ") == PERSON_SOURCE


def test_name_transforms() -> None:
    assert capitalize_first("firstName") == "FirstName"
    assert capitalize_first("") == ""
    assert accessor_name("id") == "getId"
    assert accessor_name("valid", "is") == "isValid"
    assert mutator_name("address") == "setAddress"


def test_profile_option_enum_round_trips_keys() -> None:
    assert ProfileOption("line-prefix") is ProfileOption.LINE_PREFIX


def test_multi_line_auxiliary_entries_are_split_and_prefixed() -> None:
    code = create_generator().generate(
        Struct.create("Empty"),
        _profile(["// first\n// second", "", "// third\r\n// fourth"], line_prefix="  "),
    )
    lines = code.split("\n")

    assert lines[:6] == ["  // first", "  // second", "  ", "  // third", "  // fourth", "  "]
    assert all(line.startswith("  ") for line in lines)


def test_template_engine_only_serves_built_in_templates(tmp_path) -> None:
    (tmp_path / "value_class.java.j2").write_text("replaced {{ class_name }}", encoding="utf-8")

    with pytest.raises(TypeError):
        create_template_engine(tmp_path)
    with pytest.raises(TypeError):
        TemplateEngine(tmp_path)

    code = create_generator(create_template_engine()).generate(Struct.create("E"), _profile())
    assert code.startswith("public final class E {")


def test_setter_names_follow_mutator_naming() -> None:
    struct = Struct.create("Person", [StructAttribute.create("firstName", "String")])
    code = create_generator().generate(
        struct, _profile(generate_setters="true", accessor_prefix="read")
    )

    assert f"public void {mutator_name('firstName')}(final String firstName) {{" in code
    assert "public void setFirstName(final String firstName) {" in code
    assert "public String readFirstName() {" in code


def test_reserved_word_lookup() -> None:
    assert is_reserved_word("class")
    assert is_reserved_word("null")
    assert not is_reserved_word("Class")
    assert not is_reserved_word("address")

from xinject.manifest import load_manifest_info


def test_mapping_with_string_scalars():
    info = load_manifest_info(
        "name: my_app\n"
        "version: 1.10\n"
        "publish: true\n"
        "dependencies:\n"
        "  path: ^1.8.0\n"
        "  flutter:\n"
        "    sdk: flutter\n"
    )
    assert info["name"] == "my_app"
    # no implicit typing: the version keeps its trailing zero
    assert info["version"] == "1.10"
    assert info["publish"] == "true"
    assert info["dependencies"] == {"path": "^1.8.0", "flutter": {"sdk": "flutter"}}


def test_null_forms():
    info = load_manifest_info("a:\nb: ~\nc: null\nd: [x, ~]\n")
    assert info == {"a": None, "b": None, "c": None, "d": ["x", None]}


def test_malformed_yaml_is_no_data():
    assert load_manifest_info("name: [unclosed\n") is None


def test_non_mapping_is_no_data():
    assert load_manifest_info("") is None
    assert load_manifest_info("- a\n- b\n") is None
    assert load_manifest_info("just a string") is None


def test_quoted_null_forms_stay_strings():
    info = load_manifest_info("name: \"null\"\ndescription: ''\nhome: '~'\nissues:\n")
    assert info == {"name": "null", "description": "", "home": "~", "issues": None}

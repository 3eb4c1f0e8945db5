"""
Tests for the editor generator: validation, naming, member layout,
the state machine and golden-file output.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from editor_generator.pipeline import (
    EditorGenerator,
    GenerationState,
    GenerationStateError,
    GeneratorConfig,
    IneligibleTypeError,
    InvalidInputError,
    TypeDescriptionLoader,
    generate_editor,
    is_eligible,
)
from editor_generator.pipeline.ast_backends.csharp_ast_nodes import CSharpField, CSharpMethod
from editor_generator.pipeline.type_model import (
    DeferredAnnotation,
    DeferredKind,
    FieldDescription,
    Range,
    Tooltip,
    TypeDescription,
    Unrecognized,
)

TEST_DATA_DIR = Path(__file__).with_name("test_data")

NO_BANNER = GeneratorConfig(add_generation_comment=False)


def foo_type(namespace: str | None = "Game") -> TypeDescription:
    return TypeDescription(
        name="Foo",
        namespace=namespace,
        base_types=("MonoBehaviour", "Behaviour", "Component", "Object"),
        fields=(
            FieldDescription(name="speed", type_name="int", annotations=(Range(0, 10),)),
            FieldDescription(name="label", type_name="string"),
        ),
    )


class Collector:
    def __init__(self):
        self.notices = []

    def __call__(self, notice):
        self.notices.append(notice)


FOO_EDITOR = """\
using UnityEditor;
using UnityEngine;

namespace GameEditor
{
    [CustomEditor(typeof(Game.Foo))]
    public class FooEditor : Editor
    {
        private GUIContent speedContent = new GUIContent("Speed");
        private GUIContent labelContent = new GUIContent("Label");

        public override void OnInspectorGUI()
        {
            serializedObject.Update();
            EditorGUILayout.IntSlider(serializedObject.FindProperty("speed"), 0, 10, speedContent);
            EditorGUILayout.PropertyField(serializedObject.FindProperty("label"), labelContent);
            serializedObject.ApplyModifiedProperties();
        }
    }
}
"""


class TestEligibility:
    @pytest.mark.parametrize("base", ["MonoBehaviour", "ScriptableObject"])
    def test_eligible_lineages(self, base):
        assert is_eligible(TypeDescription(name="T", base_types=(base, "Object")))

    @pytest.mark.parametrize("bases", [(), ("Object",), ("Component", "Object"), ("EditorWindow", "Object")])
    def test_ineligible_lineages_fail(self, bases):
        type_description = TypeDescription(name="T", base_types=bases)
        generator = EditorGenerator(type_description)

        assert not is_eligible(type_description)
        with pytest.raises(IneligibleTypeError):
            generator.build()
        assert generator.state == GenerationState.FAILED
        assert generator.ast is None
        assert generator.source is None

    def test_missing_type_fails(self):
        generator = EditorGenerator(None)

        assert not is_eligible(None)
        with pytest.raises(InvalidInputError):
            generator.build()
        assert generator.state == GenerationState.FAILED
        assert generator.ast is None


class TestGeneratedShape:
    def test_foo_example(self):
        source = generate_editor(foo_type(), NO_BANNER)

        assert source.text == FOO_EDITOR
        assert source.file_name == "FooEditor.cs"
        assert source.path is None

    def test_ast_members_in_order(self):
        ast = EditorGenerator(foo_type(), NO_BANNER).build()

        assert ast.namespace == "GameEditor"
        assert [u.namespace for u in ast.using_directives] == ["UnityEditor", "UnityEngine"]
        assert ast.cls.name == "FooEditor"
        assert ast.cls.base_class == "Editor"
        assert [type(m) for m in ast.cls.members] == [CSharpField, CSharpField, CSharpMethod]
        assert [m.name for m in ast.cls.members] == ["speedContent", "labelContent", "OnInspectorGUI"]

    def test_no_namespace(self):
        source = generate_editor(foo_type(namespace=None), NO_BANNER)

        assert "namespace" not in source.text
        assert "[CustomEditor(typeof(Foo))]" in source.text
        assert "\npublic class FooEditor : Editor\n{\n" in source.text

    def test_empty_namespace_is_no_namespace(self):
        ast = EditorGenerator(foo_type(namespace=""), NO_BANNER).build()
        assert ast.namespace is None

    def test_type_without_serialized_fields(self):
        type_description = TypeDescription(name="Empty", base_types=("ScriptableObject",))
        ast = EditorGenerator(type_description, NO_BANNER).build()

        method = ast.cls.members[-1]
        assert len(ast.cls.members) == 1
        assert len(method.body) == 2

    def test_tooltip_label_arguments(self):
        type_description = TypeDescription(
            name="Foo",
            base_types=("MonoBehaviour",),
            fields=(
                FieldDescription(name="hinted", annotations=(Tooltip("hint"),)),
                FieldDescription(name="plain"),
            ),
        )
        ast = EditorGenerator(type_description, NO_BANNER).build()

        hinted, plain = ast.cls.members[0], ast.cls.members[1]
        assert len(hinted.initializer.arguments) == 2
        assert hinted.initializer.arguments[1].text == '"hint"'
        assert len(plain.initializer.arguments) == 1

    def test_unsupported_annotations_do_not_fail(self):
        sink = Collector()
        type_description = TypeDescription(
            name="Foo",
            base_types=("MonoBehaviour",),
            fields=(
                FieldDescription(name="notes", type_name="string", annotations=(DeferredAnnotation(DeferredKind.TEXT_AREA),)),
                FieldDescription(name="tint", type_name="Color", annotations=(Unrecognized("ColorUsage"),)),
            ),
        )

        source = generate_editor(type_description, NO_BANNER, notice_sink=sink)

        assert 'private GUIContent notesContent = new GUIContent("Notes");' in source.text
        assert 'EditorGUILayout.PropertyField(serializedObject.FindProperty("notes"), notesContent);' in source.text
        assert 'EditorGUILayout.PropertyField(serializedObject.FindProperty("tint"), tintContent);' in source.text
        assert [(n.kind, n.field_name) for n in sink.notices] == [("TextArea", "notes"), ("ColorUsage", "tint")]

    def test_additional_usings_are_deduplicated(self):
        config = GeneratorConfig(add_generation_comment=False, additional_usings=["System", "UnityEngine", "System"])
        ast = EditorGenerator(foo_type(), config).build()

        assert [u.namespace for u in ast.using_directives] == ["UnityEditor", "UnityEngine", "System"]

    def test_can_edit_multiple_objects(self):
        config = GeneratorConfig(add_generation_comment=False, can_edit_multiple_objects=True)
        source = generate_editor(foo_type(), config)

        assert "    [CustomEditor(typeof(Game.Foo))]\n    [CanEditMultipleObjects]\n    public class FooEditor" in source.text

    def test_generation_comment_with_command(self):
        config = GeneratorConfig(generation_command="editor_generator foo.json")
        text = generate_editor(foo_type(), config).text

        assert text.startswith("//------")
        assert "//     Command: editor_generator foo.json\n" in text
        assert "// </auto-generated>\n//------------------------------------------------------------------------------\n\nusing UnityEditor;" in text

    def test_output_dir_resolves_path(self, tmp_path):
        source = generate_editor(foo_type(), NO_BANNER, output_dir=tmp_path)
        assert source.path == tmp_path / "FooEditor.cs"


class TestStateMachine:
    def test_full_walk(self):
        generator = EditorGenerator(foo_type())
        assert generator.state == GenerationState.IDLE

        generator.build()
        assert generator.state == GenerationState.BUILT

        source = generator.render()
        assert generator.state == GenerationState.RENDERED
        assert generator.source is source

    def test_render_before_build(self):
        with pytest.raises(GenerationStateError):
            EditorGenerator(foo_type()).render()

    def test_render_only_once(self):
        generator = EditorGenerator(foo_type())
        generator.generate()
        with pytest.raises(GenerationStateError):
            generator.render()

    def test_build_only_once(self):
        generator = EditorGenerator(foo_type())
        generator.build()
        with pytest.raises(GenerationStateError):
            generator.build()

    def test_failed_generator_cannot_render(self):
        generator = EditorGenerator(TypeDescription(name="T"))
        with pytest.raises(IneligibleTypeError):
            generator.build()
        with pytest.raises(GenerationStateError):
            generator.render()


class TestGoldenFiles:
    def test_player_editor_matches_reference(self):
        type_description = TypeDescriptionLoader().load(TEST_DATA_DIR / "player.json")
        source = generate_editor(type_description, notice_sink=Collector())

        expected = (TEST_DATA_DIR / "PlayerEditor.cs").read_text()
        assert source.text == expected
        assert source.file_name == "PlayerEditor.cs"

    def test_independent_runs_are_identical(self):
        loader = TypeDescriptionLoader()
        first = generate_editor(loader.load(TEST_DATA_DIR / "player.json"), notice_sink=Collector())
        second = generate_editor(loader.load(TEST_DATA_DIR / "player.json"), notice_sink=Collector())
        assert first == second

from editor_generator.pipeline.config import GeneratorConfig, OutputConfig, OutputMode


def test_defaults():
    config = GeneratorConfig()

    assert config.add_generation_comment is True
    assert config.generation_command == ""
    assert config.additional_usings == []
    assert config.can_edit_multiple_objects is False
    assert config.output == OutputConfig(mode=OutputMode.ERROR_IF_EXISTS, atomic_write=True)


def test_from_dict():
    config = GeneratorConfig.from_dict(
        {
            "add_generation_comment": False,
            "additional_usings": ["System"],
            "can_edit_multiple_objects": True,
            "output": {"mode": "force", "atomic_write": False},
            "unknown_option": 1,
        }
    )

    assert config.add_generation_comment is False
    assert config.additional_usings == ["System"]
    assert config.can_edit_multiple_objects is True
    assert config.output.mode == OutputMode.FORCE
    assert config.output.atomic_write is False
    assert not hasattr(config, "unknown_option")


def test_to_dict_round_trip():
    config = GeneratorConfig(additional_usings=["System.Linq"], output=OutputConfig(mode=OutputMode.FORCE))
    assert GeneratorConfig.from_dict(config.to_dict()) == config

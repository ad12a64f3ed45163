import pytest

from stringer.types import CompositeAction, Job, Step, Workflow


def test_composite_action_to_dict_excludes_path():
    action = CompositeAction(
        name="Greeter",
        description="Says hello",
        inputs={"who": {"required": True}},
        outputs={"greeting": {"value": "hi"}},
        path="some/action.yml",
    )
    data = action.to_dict()
    assert "path" not in data
    assert set(data) == {"name", "description", "inputs", "outputs"}
    assert data["inputs"] == {"who": {"required": True}}


def test_composite_action_round_trip_drops_path():
    action = CompositeAction(
        name="Greeter",
        description="Says hello",
        inputs={"who": {"description": "person"}},
        path="dir/action.yaml",
    )
    restored = CompositeAction.from_dict(action.to_dict())
    assert restored.name == action.name
    assert restored.description == action.description
    assert restored.inputs == action.inputs
    assert restored.outputs is None
    assert restored.path == ""


def test_composite_action_from_dict_missing_fields_use_defaults():
    restored = CompositeAction.from_dict({"name": "Only name"})
    assert restored == CompositeAction(name="Only name", description="")


def test_composite_action_from_dict_rejects_non_mapping():
    with pytest.raises(TypeError):
        CompositeAction.from_dict(["not", "a", "mapping"])


def test_composite_action_from_dict_rejects_wrong_field_type():
    with pytest.raises(TypeError):
        CompositeAction.from_dict({"name": 5, "description": "d"})


def test_step_to_dict_omits_empty_optional_fields():
    step = Step(name="Build")
    assert step.to_dict() == {"name": "Build"}


def test_step_to_dict_includes_set_fields_with_json_names():
    step = Step(name="Checkout", uses="actions/checkout@v4", with_={"depth": "1"})
    data = step.to_dict()
    assert data == {"name": "Checkout", "uses": "actions/checkout@v4", "with": {"depth": "1"}}
    assert "run" not in data


def test_step_to_dict_omits_empty_with_mapping():
    step = Step(name="Run", run="make", with_={})
    assert step.to_dict() == {"name": "Run", "run": "make"}


def test_job_steps_serialise_through_step():
    job = Job(name="build", runs_on="ubuntu-latest", steps=[Step(name="a", run="x"), Step(name="b")])
    assert [s.to_dict() for s in job.steps] == [{"name": "a", "run": "x"}, {"name": "b"}]
    assert Job().steps == []
    assert Job().steps is not job.steps


def test_workflow_holds_given_values():
    workflow = Workflow(name="CI", on={"push": None}, jobs={"build": {}})
    assert workflow.on == {"push": None}
    assert workflow.jobs == {"build": {}}
    assert Workflow().on is None
import pytest
from unittest.mock import MagicMock, Mock, call

from commandstacker.core.command import Command, CommandLike, CompositeCommand, FunctionCommand


def test_command_is_abstract():
    with pytest.raises(TypeError):
        Command()


def test_function_command_calls_its_functions():
    run_func, undo_func = Mock(), Mock()
    command = FunctionCommand(run_func, undo_func, name="Paint")

    command.run()
    run_func.assert_called_once_with()
    undo_func.assert_not_called()

    command.undo()
    undo_func.assert_called_once_with()
    assert str(command) == "Paint"


def test_function_command_keeps_extra_fields():
    command = FunctionCommand(Mock(), Mock(), layer=3, before="a")
    assert command.layer == 3
    assert command.before == "a"


def test_composite_command_runs_in_order_and_undoes_in_reverse():
    """Test that children run front to back and undo back to front."""
    parent = MagicMock()
    first, second = parent.first, parent.second
    command = CompositeCommand([first, second], name="Group")

    command.run()
    command.undo()

    assert parent.mock_calls == [
        call.first.run(),
        call.second.run(),
        call.second.undo(),
        call.first.undo(),
    ]
    assert str(command) == "Group"


def test_structural_commands_satisfy_command_like():
    class Toggle:
        def run(self):
            pass

        def undo(self):
            pass

    assert isinstance(Toggle(), CommandLike)
    assert isinstance(FunctionCommand(Mock(), Mock()), CommandLike)
    assert not isinstance(object(), CommandLike)


@pytest.mark.parametrize("field", ["run", "undo", "run_func", "undo_func"])
def test_function_command_rejects_reserved_fields(field):
    """Test that extra fields cannot replace the command's callables."""
    with pytest.raises(ValueError, match=field):
        FunctionCommand(Mock(), Mock(), **{field: "meta"})

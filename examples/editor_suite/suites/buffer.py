import asyncio


class TextBuffer:
    """Tiny editor-like buffer with cursor and undo."""

    def __init__(self) -> None:
        self._value = ""
        self._history: list[str] = []
        self.cursor = (0, 0)

    def set_value(self, text: str) -> None:
        self._history.append(self._value)
        self._value = text
        self.cursor = (0, 0)

    def get_value(self) -> str:
        return self._value

    def insert(self, text: str) -> None:
        self.set_value(self._value + text)

    def undo(self) -> None:
        if self._history:
            self._value = self._history.pop()

    def move_cursor_to(self, row: int, column: int) -> None:
        lines = self._value.split("\n")
        if row >= len(lines) or column > len(lines[row]):
            raise IndexError(f"cursor ({row}, {column}) outside buffer")
        self.cursor = (row, column)


def register_buffer_tests(runner) -> None:
    buffer = TextBuffer()

    def set_and_get(t):
        buffer.set_value("Hello editor")
        t.assert_equal(buffer.get_value(), "Hello editor", "Buffer value should match the set value")

    def cursor_movement(t):
        buffer.set_value("line1\nline2\nline3")
        buffer.move_cursor_to(1, 2)
        row, column = buffer.cursor
        t.assert_equal(row, 1, "Cursor row should be correct")
        t.assert_equal(column, 2, "Cursor column should be correct")

    def undo(t):
        buffer.set_value("one")
        buffer.insert("\ntwo")
        buffer.undo()
        t.assert_equal(buffer.get_value(), "one", "Undo should revert last change")

    async def slow_save(t):
        await asyncio.sleep(0.5)
        t.assert_true(buffer.get_value(), "Buffer should not be empty after save")

    def out_of_range_cursor(t):
        buffer.move_cursor_to(99, 0)

    runner.register("Set and get value", set_and_get)
    runner.register("Cursor movement", cursor_movement)
    runner.register("Undo reverts last change", undo)
    runner.register("Slow save completes", slow_save)
    # fails on purpose to show the failure rendering
    runner.register("Cursor outside buffer", out_of_range_cursor)

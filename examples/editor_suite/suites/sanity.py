import asyncio


def register(runner) -> None:
    @runner.test("Arithmetic works")
    def _arithmetic(t):
        t.assert_equal(1 + 1, 2)

    @runner.test("Strings are not numbers")
    def _types(t):
        t.assert_true("5" != 5, "string and int must differ")

    @runner.test("Awaits a deferred value")
    async def _deferred(t):
        loop = asyncio.get_running_loop()
        future = loop.create_future()
        loop.call_later(0.3, future.set_result, "ready")
        t.assert_equal(await future, "ready")

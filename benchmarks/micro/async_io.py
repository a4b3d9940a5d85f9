# benchmarks/micro/async_io.py
#
# Shows the awaited-invocation path: the versions here return coroutines, and
# each repetition is only timed once the coroutine has finished.

import asyncio

from algobench import TestSuite, create_test, create_version


async def sleep_once(delay_s):
    await asyncio.sleep(delay_s)


async def sleep_in_steps(delay_s, steps):
    for _ in range(steps):
        await asyncio.sleep(delay_s / steps)


def build_test(delay_s=0.01, runs=10):
    return create_test("async sleep", [
        create_version("Single Sleep", sleep_once, runs, [delay_s]),
        create_version("Ten Short Sleeps", sleep_in_steps, runs, [delay_s, 10]),
    ])


def main():
    print("--- Running Async Sleep Benchmark ---")
    suite = TestSuite()
    suite.add_test(build_test())
    suite.run_sync()

if __name__ == "__main__":
    main()

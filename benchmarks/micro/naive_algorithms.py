# benchmarks/micro/naive_algorithms.py
#
# Times a handful of deliberately naive algorithms with five runs each:
# a quadratic duplicate check, a quadratic intersection and the exponential
# recursive Fibonacci.

from algobench import TestSuite, create_test, create_version


def contains_duplicate(values):
    for i in range(len(values)):
        for j in range(i + 1, len(values)):
            if values[i] == values[j]:
                return True
    return False


def find_common_elements(first, second):
    common = []
    for a in first:
        for b in second:
            if a == b:
                common.append(a)
    return common


def fibonacci(n):
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def build_test(fib_n=25, runs=5):
    return create_test("Algorithm Performance Test", [
        create_version("Naive Contains Duplicate", contains_duplicate, runs, [[1, 2, 3, 4, 5, 1]]),
        create_version("Naive Find Common Elements", find_common_elements, runs,
                       [[1, 2, 3, 4], [3, 4, 5, 6]]),
        create_version("Naive Fibonacci", fibonacci, runs, [fib_n]),
    ])


def main():
    print("--- Running Naive Algorithms Benchmark ---")
    suite = TestSuite()
    suite.add_test(build_test())
    suite.run_sync()

if __name__ == "__main__":
    main()

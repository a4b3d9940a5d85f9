# examples/festival_suite.py
#
# A benchmark script meant for the `algobench` command line tool:
#
#     algobench examples/festival_suite.py --log-level INFO
#
# The tool picks up the module-level `suite` below and runs it. Run directly,
# the script does the same through `main()`.

from algobench import TestSuite
from benchmarks.festival import artist_search, stage_assignment
from benchmarks.festival.data import generate_artists, generate_stages, make_rng


def build_suite(rng, artist_count=1_000, runs=50, stream=None):
    """Builds the festival suite over data drawn from `rng`."""
    stages = generate_stages(20)
    artists = generate_artists(artist_count, stages, rng)

    suite = TestSuite(stream=stream)
    suite.add_test(artist_search.build_test(artists, name=f"Artist {artist_count // 2}", runs=runs))
    suite.add_test(stage_assignment.build_test(artists, stages, runs=runs))
    return suite


suite = build_suite(make_rng())


def main():
    """Runs the demonstration."""
    print("--- Running Festival Benchmarks ---")
    suite.run_sync()

if __name__ == "__main__":
    main()

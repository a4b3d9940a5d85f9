# benchmarks/festival/stage_assignment.py
#
# Compares two ways of assigning artists to stages by genre. Each genre is
# played on exactly one stage. Both versions write the stage id into the
# artist records in place.

from algobench import TestSuite, create_test, create_version
from benchmarks.festival.data import generate_artists, generate_stages, make_rng


def assign_stages(artists, stages):
    """
    Nested loop over stages then artists. Each stage is given to the first
    artist of a matching genre only. O(n*m) time, O(1) space.
    """
    for stage in stages:
        for artist in artists:
            if artist["genre"] in stage["genres"]:
                artist["stage"] = stage["id"]
                break


def assign_stages_indexed(artists, stages):
    """Builds a genre -> stage map, then one pass over artists. O(n+m) time, O(m) space."""
    genre_to_stage = {}
    for stage in stages:
        for genre in stage["genres"]:
            genre_to_stage[genre] = stage["id"]
    for artist in artists:
        artist["stage"] = genre_to_stage.get(artist["genre"])


def build_test(artists, stages, runs=100):
    return create_test("assign", [
        create_version("Nested Loop Assignment", assign_stages, runs, [artists, stages]),
        create_version("Genre Index Assignment", assign_stages_indexed, runs, [artists, stages]),
    ])


def main():
    rng = make_rng()
    stages = generate_stages(20)
    artists = generate_artists(10_000, stages, rng)

    suite = TestSuite()
    suite.add_test(build_test(artists, stages))
    suite.run_sync()

if __name__ == "__main__":
    main()

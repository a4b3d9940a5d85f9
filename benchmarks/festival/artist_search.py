# benchmarks/festival/artist_search.py
#
# Compares two ways of looking an artist up by name: a linear scan over the
# list and a binary search that relies on the list being sorted by name.

from algobench import TestSuite, create_test, create_version
from benchmarks.festival.data import generate_artists, generate_stages, make_rng


def find_artist_id(artists, name):
    """Linear scan. O(n) time, O(1) space."""
    for artist in artists:
        if artist["name"] == name:
            return artist["id"]
    return -1


def find_artist_id_bisect(artists, name):
    """Binary search over a name-sorted list. O(log n) time, O(1) space."""
    left, right = 0, len(artists) - 1
    while left <= right:
        mid = (left + right) // 2
        mid_name = artists[mid]["name"]
        if mid_name == name:
            return artists[mid]["id"]
        elif mid_name < name:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def build_test(artists, name="Artist 10", runs=100):
    return create_test("search", [
        create_version("Linear Search", find_artist_id, runs, [artists, name]),
        create_version("Binary Search", find_artist_id_bisect, runs, [artists, name]),
    ])


def main():
    rng = make_rng()
    stages = generate_stages(20)
    artists = generate_artists(10_000, stages, rng)

    suite = TestSuite()
    suite.add_test(build_test(artists, name="Artist 5000"))
    suite.run_sync()

if __name__ == "__main__":
    main()

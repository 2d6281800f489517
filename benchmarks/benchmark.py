import random
import sys
from pyinstrument import Profiler
from ordseq import new, comparing, new_with


def fill_and_drain(seq, values):
    for v in values:
        seq.add(v)
    while seq.poll_first_opt() is not None:
        pass


def benchmark_large(n=20_000, rounds=5, html=None):
    rng = random.Random(1234)
    values = [rng.randint(0, n) for _ in range(n)]
    words = ["".join(rng.choice("abcdefgh") for _ in range(rng.randint(1, 12))) for _ in range(n)]
    print(f"Generated {n} ints and {n} words")

    profiler = Profiler()
    profiler.start()

    print(f"Starting workload ({rounds} rounds)...")
    for _ in range(rounds):
        fill_and_drain(new(), values)
        fill_and_drain(new_with(comparing(len)), words)
    print("Workload finished.")

    profiler.stop()

    profiler.print()

    if html:
        with open(html, "w") as f:
            f.write(profiler.output_html())

if __name__ == "__main__":
    benchmark_large(html=sys.argv[1] if len(sys.argv) > 1 else None)

# demos/demo_quickstart.py
import numpy as np

from progbasics.core.qsort import qsort


def main():
    # Sort a small random ndarray in place
    X = np.random.default_rng(0).integers(0, 100, size=10)
    qsort(X)
    print("Sorted OK:", X)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Example usage of the lifeview package.
"""

from lifeview import Board, GameOfLife


def main():
    """Demonstrate programmatic usage of the lifeview package."""
    board = Board.from_text(
        [
            "_X________",
            "__X_______",
            "XXX_______",
            "__________",
            "__________",
            "__________",
            "__________",
            "__________",
        ]
    )
    game = GameOfLife(board)

    print("Initial state:")
    print(board)
    print(f"Population: {game.population}")
    print()

    # Follow the glider through a window that moves with it
    for i in range(8):
        game.step()
        offset = game.generation // 4
        view = game.board.window_offsets(offset, offset, 3, 3)
        print(f"Generation {game.generation}, window {view.bounds}:")
        print(view)

        if game.cycle_detected:
            print(f"Cycle detected! Length: {game.cycle_length}")
            break

        print()

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()

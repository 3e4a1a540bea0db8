if __name__ == "__main__":
    import random
    import time

    from config import EngineSettings, setup_logging
    from draughts import Color, choose_computer_move, init_board, legal_moves, make_move_sequence
    from draughts.engine import find_all_captures, find_all_normal_moves

    setup_logging()
    print("=== PARALLEL ENUMERATION BENCHMARK ===")

    # Collect positions from a seeded random game
    rng = random.Random(2024)
    serial = EngineSettings(max_workers=1)
    board = init_board()
    side = Color.LIGHT
    positions = []
    for _ in range(80):
        moves = legal_moves(board, side, serial)
        if not moves:
            break
        positions.append((board.copy(), side))
        make_move_sequence(board, choose_computer_move(moves, rng))
        side = side.opponent
    print('Positions collected: {}'.format(len(positions)))

    configs = [
        ('inline', EngineSettings(max_workers=1)),
        ('2 threads', EngineSettings(max_workers=2)),
        ('all threads', EngineSettings()),
        ('2 processes', EngineSettings(max_workers=2, worker_backend='process')),
    ]
    for name, settings in configs:
        start = time.time()
        total = 0
        for pos, color in positions:
            total += len(find_all_captures(pos, color, settings))
            total += len(find_all_normal_moves(pos, color, settings))
        elapsed = time.time() - start
        print('{:12s} {:8.3f}s  ({} sequences, {:.2f} ms/position)'.format(
            name, elapsed, total, 1000 * elapsed / max(1, len(positions))))

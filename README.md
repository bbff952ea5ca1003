# searchplay

Small search algorithms for mazes and noughts and crosses that you can trace.
Each algorithm records or reports the steps it takes. You can follow how a
breadth-first search grows its frontier, or how minimax scores and prunes
positions.

The interactive commands print their menus, prompts and traces in Spanish.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Mazes

### `searchplay.maze`

This module has four built-in 10×10 mazes. In each maze `0` is a corridor and
`1` is a wall. Each maze has a fixed start (the rat) and a fixed goal (the
cheese).

```python
from searchplay.maze import get_problem, breadth_first_search, depth_first_search

problem = get_problem(1)          # MazeProblem: number, board, start, goal
trace = breadth_first_search(problem.board, problem.start, problem.goal)
trace.found                       # True when the goal was reached
trace.path                        # tuple of cells from start to goal, or None
for step in trace.steps:          # SearchStep: current, path, frontier
    ...
```

- `get_maze(index)` returns a fresh copy of a maze, counting from 0.
- `get_problem(number)` takes a number from 1 to 4. Any other number raises
  `ValueError`.
- `breadth_first_search` uses a FIFO queue. `depth_first_search` uses a stack.
  Both try neighbours in the order up, down, left, right.
- `is_open(board, cell, visited)` tells whether a cell can be entered.
- `render_maze(board, path, goal)` draws the maze. Walls are `#`, corridors
  `.`, the path `*`, the start `R` and the goal `Q`.
- `format_step(method, step, board, goal)` describes one step as text.

### `searchplay.flood`

This module floods a marked maze breadth-first. In a marked maze `2` is the rat
and `3` is the cheese. Every cell that joins the queue is marked as `2`, and the
flood stops when the cheese is dequeued.

```python
from searchplay.flood import get_marked_maze, flood_search, render_marked

for step in flood_search(get_marked_maze(0), (9, 3)):
    print(step.number, step.position, step.reached)
    print(render_marked(step.board))
```

`flood_search` does not change the board you pass in. Each `FloodStep` holds
a snapshot of the board as it stood at that step.

### Commands

```
searchplay-maze     # menu: choose a maze (1-4) and BFS or DFS, then see every step
searchplay-flood    # floods all four marked mazes in turn
```

## Noughts and crosses

### `searchplay.greedy`

- `Board` keeps the cells and whose turn it is: `1` plays X and `2` plays O.
  Its methods are `make_move`, `winner`, `is_full`, `game_over`, `turn`,
  `cell`, `possible_moves`, `copy` and `render`. `make_move` raises
  `InvalidMove` (a `ValueError`) when the cell is off the board or already
  taken.
- `evaluate_move(board, row, col)` scores a single move. A move that wins
  scores 100. Otherwise the centre adds 5 and a corner adds 3. Each line
  through the cell adds 10 when the move makes an own pair, and 20 when the
  line holds two of the opponent's marks.
- `best_greedy_move(board, log=None)` returns the first move with the highest
  score. It raises `ValueError` on a full board.

### `searchplay.alphabeta`

- The bot plays `O` and empty cells are `.`.
- `minimax(board, maximizing, alpha, beta, depth, trace)` scores a position:
  `+1` when O has won, `-1` when X has won, and `0` for a draw or for any
  position at depth 3 or deeper (`MAX_DEPTH`).
- `find_best_move(board, trace=None)` returns the first empty cell with the
  best score for O. The optional `trace` receives each evaluated position as
  text, from `format_evaluation`.

### `searchplay.symmetry`

- The machine plays `X` and moves first. The user plays `O`.
- `symmetric_moves(board)` keeps one move from each group of moves that are
  equivalent under rotation and reflection. It uses `rotate90`, `reflect`,
  `board_variants` and `board_key`.
- `evaluate(board)` is the number of lines still open for X minus the number
  still open for O (`count_open_lines`).
- `agent_reasoning(board)` looks one reply ahead and returns a `Reasoning`.
  A `Reasoning` holds the chosen `move`, its `value`, every `candidates` entry
  and the printed `report` tree. The first candidate is weighed against every
  symmetric reply, and later candidates only against their first reply.
- `parse_move(text, board)` reads input such as `A3` or `b2`. It raises
  `ValueError` for bad input or an occupied cell.

### Commands

```
searchplay-greedy      # choose whether to move first; enter "row col" (0-2)
searchplay-alphabeta   # you are X and move first; enter "row col" (0-2)
searchplay-symmetry    # the machine moves first; enter moves like A3
```

## What it does not do

- The commands play only in the terminal. There is no graphical board.
- The commands work only with the built-in mazes. They have no way to load a
  maze from a file.
- Games are not saved. When input ends, the game stops.
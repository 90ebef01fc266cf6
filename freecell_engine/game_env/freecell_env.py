import os
import argparse
import logging
from typing import Any
import numpy as np
import gymnasium as gym
from termcolor import colored
from ..core.card import Card
from ..core.engine import FreeCellEngine, MoveResult
from ..core.standard_spec import StandardSpec as Spec
from .obs_space import CompactObsSpace as ObsSpace
from .action_space import TupleActionSpace as ActionSpace

class FreeCellEnv(gym.Env):
    """Freecell game environment driving a FreeCellEngine"""

    def __init__(self, max_steps: int = 1000):
        self.engine = FreeCellEngine()
        self._obs = None
        self._step = 0
        self._max_steps = max_steps
        self.action_space = ActionSpace.get_gym_space()
        self.observation_space = ObsSpace.get_gym_space()

    def step(self, action: Any) \
        -> tuple[Any, float, bool, bool, dict[str, Any]]:
        self._step += 1
        source, dest, count = ActionSpace.parse_action(action)
        reward = -1.
        solved = False
        steps_exceed_limit = False
        result = {}
        if self.engine.apply_move(source, dest, count) is MoveResult.SUCCESS:
            result['status'] = 'success'
            self._obs = ObsSpace.encode(self.engine.board)
            if dest.kind == 'home':
                reward += 10.
                if self.engine.is_won():
                    reward += 100.
                    solved = True
        else:
            reward -= 100.
            result['status'] = 'failure'
        if self._step >= self._max_steps:
            reward -= 200.
            steps_exceed_limit = True
        return self._obs, reward, solved, steps_exceed_limit, result

    def auto_move_home(self) -> tuple[Any, bool]:
        """Send every playable card home, returns the new observation and whether the game is won"""
        self.engine.auto_move_home()
        self._obs = ObsSpace.encode(self.engine.board)
        return self._obs, self.engine.is_won()

    def reset(self, *, seed: int | None = None, options: dict[str, Any] | None = None) \
        -> tuple[Any, dict[str, Any]]:
        super().reset(seed=seed)
        game_number = (options or {}).get('game_number')
        if game_number is None:
            game_number = int(self.np_random.integers(Spec.min_game_number, Spec.max_game_number + 1))
        self.engine.new_game(game_number)
        self._obs = ObsSpace.encode(self.engine.board)
        self._step = 0
        return self._obs, {'game_number': game_number}

    def render(self) -> str | list[str] | None:
        return self._visualize()

    def close(self) -> None:
        pass

    def _visualize_card(self, card: Card | None) -> str:
        if card is None:
            return '--'
        return colored(card.label, card.color if card.is_red else 'white')

    def _visualize(self) -> str:
        board = self.engine.board
        s1 = 'free cells:\t '
        for loc in board.locations('free'):
            s1 += colored(str(ActionSpace.location_number(loc)), 'blue') + '\t '
        s1 += '\n\t\t '
        for loc in board.locations('free'):
            s1 += self._visualize_card(board.top(loc)) + '\t '

        s2 = 'home cells:\t '
        for loc in board.locations('home'):
            s2 += colored(str(ActionSpace.location_number(loc)), 'blue') + '\t '
        s2 += '\n\t\t '
        for loc in board.locations('home'):
            s2 += self._visualize_card(board.top(loc)) + '\t '

        s3 = 'tableau:\n'
        columns = []
        for loc in board.locations('tableau'):
            columns.append(board.get_cards(loc))
            s3 += colored(str(ActionSpace.location_number(loc)), 'blue') + '\t '
        for i in range(max(len(column) for column in columns)):
            s3 += '\n'
            for column in columns:
                if len(column) > i:
                    s3 += self._visualize_card(column[i]) + '\t '
                else:
                    s3 += '  \t '

        return s1 + '\n\n' + s2 + '\n\n' + s3


def parse_command(line: str) -> tuple[int, int, int]:
    """
    Parse 'from to [count]' typed at the prompt

    Raises:
        ValueError: when the line is not two or three integers
    """
    parts = line.split()
    if len(parts) not in (2, 3):
        raise ValueError(f'expect "from to [count]", but get {line!r}')
    source, dest = int(parts[0]), int(parts[1])
    count = int(parts[2]) if len(parts) == 3 else 1
    return source, dest, count


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('--game-number', type=int)
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    env = FreeCellEnv()
    options = {'game_number': args.game_number} if args.game_number else None
    _, info = env.reset(options=options)

    moves = 0
    while True:
        if not args.verbose:
            os.system('clear')
        print(f'Game #{info["game_number"]}\n')
        print(env.render() + '\n')
        line = input('Move "from to [count]", "h" to move cards home, "q" to quit: ').strip()
        if line == 'q':
            break
        if line == 'h':
            _, terminated = env.auto_move_home()
            truncated = False
        else:
            try:
                source, dest, count = parse_command(line)
                _, _, terminated, truncated, result = env.step(np.array([source, dest, count - 1]))
            except ValueError as exc:
                print(f'{exc}, press enter to continue')
                input()
                continue
            moves += 1
            if result['status'] == 'failure':
                print('Invalid move, press enter to continue')
                input()
        if terminated:
            print(f'Congrats! You solve this in {moves} steps')
            break
        if truncated:
            print(f'You failed to solve this in {moves} steps')
            break

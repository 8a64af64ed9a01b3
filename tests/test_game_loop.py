"""Tests for tick(), win evaluation and render()."""

from isoghost.tiles.tile_types import TileType, DecorationType, Direction, GhostFrame
from isoghost.entities.ghost import GhostState
from isoghost.level.config_loader import RuntimeConfig
from isoghost.level.level_generator import find_invalid_bridge_directions
from isoghost.core.game_loop import (
    apply_command,
    evaluate_won,
    new_game,
    render,
    tick,
)

from conftest import VIEWPORT, empty_decorations


def one_coin_level(make_level):
    decorations = empty_decorations()
    decorations[0][1] = DecorationType.CHEST
    decorations[5][5] = DecorationType.BUSH
    return make_level(decorations=decorations)


class TestWinCondition:
    def test_empty_board_is_won(self, make_level):
        assert evaluate_won(make_level()) is True

    def test_cosmetic_only_is_won(self, make_level):
        decorations = empty_decorations()
        decorations[3][3] = DecorationType.FLOWERS
        assert evaluate_won(make_level(decorations=decorations)) is True

    def test_valued_left_is_not_won(self, make_level):
        assert evaluate_won(one_coin_level(make_level)) is False

    def test_collecting_last_wins(self, make_state, make_level):
        state = make_state(one_coin_level(make_level))
        tick(state, [], VIEWPORT)
        assert not state.won
        tick(state, [Direction.EAST], VIEWPORT)
        assert state.won
        assert state.score.total() == 5
        assert state.level.tiles[0][1].decoration == DecorationType.NONE

    def test_moves_ignored_once_won(self, make_state):
        state = make_state()
        tick(state, [], VIEWPORT)
        assert state.won
        tick(state, [Direction.EAST, Direction.SOUTH], VIEWPORT)
        assert state.ghost.position == (0, 0)
        assert apply_command(state, Direction.EAST) is False

    def test_lost_is_never_set(self, make_state, make_level):
        state = make_state(one_coin_level(make_level))
        for direction in [Direction.EAST, Direction.SOUTH, Direction.WEST, Direction.NORTH] * 5:
            tick(state, [direction], VIEWPORT)
        assert state.lost is False

    def test_lost_also_blocks_moves(self, make_state, make_level):
        state = make_state(one_coin_level(make_level))
        state.lost = True
        tick(state, [Direction.EAST], VIEWPORT)
        assert state.ghost.position == (0, 0)
        assert state.score.total() == 0


class TestTick:
    def test_returns_state(self, make_state):
        state = make_state()
        assert tick(state, [], VIEWPORT) is state
        assert state.frame == 1

    def test_applies_commands_in_order(self, make_state, make_level):
        state = make_state(one_coin_level(make_level))
        tick(state, [Direction.SOUTH, Direction.SOUTH, Direction.EAST], VIEWPORT)
        assert state.ghost.position == (1, 2)
        assert state.ghost.state is GhostState.MOVED
        tick(state, [], VIEWPORT)
        assert state.ghost.state is GhostState.IDLE

    def test_blocked_command_is_noop(self, make_state, make_level):
        state = make_state(one_coin_level(make_level))
        tick(state, [Direction.WEST], VIEWPORT)
        assert state.ghost.position == (0, 0)
        assert state.ghost.state is GhostState.IDLE
        assert state.score.total() == 0

    def test_camera_follows_ghost(self, make_state):
        state = make_state()
        # ghost at (0, 0) sits near the top of the view
        tick(state, [], VIEWPORT)
        assert state.camera.shift_y > 0


class TestNewGame:
    def test_fixed_seed(self):
        runtime = RuntimeConfig(seed_mode="fixed", seed=42, ghost_frame=GhostFrame.CYAN)
        a = new_game(runtime, VIEWPORT)
        b = new_game(runtime, VIEWPORT)
        assert [[t.variant for t in row] for row in a.level.tiles] == \
            [[t.variant for t in row] for row in b.level.tiles]
        assert a.ghost.frame == GhostFrame.CYAN
        assert a.ghost.position == (0, 0)
        assert a.level.tile_at((0, 0)).walkable
        assert find_invalid_bridge_directions(a.level) == []
        assert a.score.total() == 0
        assert a.won == evaluate_won(a.level)


class TestRender:
    def test_draws_every_tile(self, make_state, recording_renderer):
        state = make_state()
        render(state, recording_renderer)
        tiles = [s for s in recording_renderer.sprites if isinstance(s[0], TileType)]
        assert len(tiles) == 100

    def test_draws_decorations_and_ghost(self, make_state, make_level, recording_renderer):
        state = make_state(one_coin_level(make_level))
        render(state, recording_renderer)
        decorations = [s[0] for s in recording_renderer.sprites if isinstance(s[0], DecorationType)]
        ghosts = [s[0] for s in recording_renderer.sprites if isinstance(s[0], GhostFrame)]
        assert sorted(decorations) == [DecorationType.BUSH, DecorationType.CHEST]
        assert ghosts == [GhostFrame.ORANGE]

    def test_ghost_drawn_on_its_tile(self, make_state, recording_renderer):
        state = make_state(start=(3, 4))
        render(state, recording_renderer)
        sprites = recording_renderer.sprites
        ghost_index = [i for i, s in enumerate(sprites) if isinstance(s[0], GhostFrame)]
        assert len(ghost_index) == 1
        tile_call = sprites[ghost_index[0] - 1]
        assert isinstance(tile_call[0], TileType)
        assert tile_call[1:] == sprites[ghost_index[0]][1:]

    def test_points_readout(self, make_state, recording_renderer):
        state = make_state()
        state.score.credit(7)
        render(state, recording_renderer)
        assert any(t[0] == "Points: 7" for t in recording_renderer.texts)

    def test_banner_only_when_over(self, make_state, make_level, recording_renderer):
        state = make_state(one_coin_level(make_level))
        render(state, recording_renderer)
        assert not any(t[0] == "Won!" for t in recording_renderer.texts)

        state.won = True
        render(state, recording_renderer)
        assert any(t[0] == "Won!" for t in recording_renderer.texts)

    def test_lost_banner(self, make_state, make_level, recording_renderer):
        state = make_state(one_coin_level(make_level))
        state.lost = True
        render(state, recording_renderer)
        assert any(t[0] == "Lost!" for t in recording_renderer.texts)

    def test_background(self, make_state, recording_renderer):
        render(make_state(), recording_renderer, background=(255, 255, 255))
        assert recording_renderer.cleared == [(255, 255, 255)]

    def test_render_does_not_mutate(self, make_state, make_level, recording_renderer):
        state = make_state(one_coin_level(make_level))
        before = (state.camera.translation, state.camera.pending_shift, state.ghost.position,
                  state.score.total(), state.frame)
        render(state, recording_renderer)
        after = (state.camera.translation, state.camera.pending_shift, state.ghost.position,
                 state.score.total(), state.frame)
        assert before == after

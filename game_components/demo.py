import pyray as rl
from game_components import config
from game_components import trace as tracing
from game_components.entity import Entity, create_player, create_npc


# Stands in for polling the keyboard
SCRIPTED_KEYS = [
    config.MOVE_LEFT,
    config.MOVE_LEFT,
    config.MOVE_RIGHT,
    rl.KeyboardKey.KEY_SPACE,
]


def run(trace: tracing.Trace = tracing.info, frames: int = config.DEMO_FRAMES) -> tuple[Entity, Entity]:
    trace("Creating entities...")

    player = create_player(trace)
    npc = create_npc(trace)

    for frame in range(frames):
        trace(f"Frame {frame}")

        player.update(SCRIPTED_KEYS[frame % len(SCRIPTED_KEYS)])
        npc.update_autonomous()

    trace(f"Done: {player!r}, {npc!r}")

    return player, npc


def main():
    run()


if __name__ == '__main__':
    main()

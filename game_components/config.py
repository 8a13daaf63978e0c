import pyray as rl

MOVE_LEFT = rl.KeyboardKey.KEY_LEFT
MOVE_RIGHT = rl.KeyboardKey.KEY_RIGHT

PLAYER_WALK_ACCELERATION = 1
NPC_WALK_ACCELERATION = 2

PLAYER_NAME = "player"
NPC_NAME = "npc"

DEMO_FRAMES = 4

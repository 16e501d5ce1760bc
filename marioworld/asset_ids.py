"""Numeric identifiers for entities, animations and sprites."""

# Entity IDs
ID_ENT_MARIO = 0
ID_ENT_BOOMERANG_BRO = 1
ID_ENT_GREEN_PARATROOPA_HOPPER = 2
ID_ENT_GREEN_TROOPA = 3
ID_ENT_RED_TROOPA = 4
ID_ENT_GOOMBA = 5
ID_ENT_PARAGOOMBA = 6
ID_ENT_GREEN_PIRANHA = 7
ID_ENT_GREEN_PIRANHA_SPIT_FIRE = 8
ID_ENT_RED_PIRANHA_SPIT_FIRE = 9
ID_ENT_GROUND = 10
ID_ENT_WINGS = 12
ID_ENT_BULLET = 13

ID_ENT_BUSH = 11

ID_ENT_CLOUD = 15
ID_ENT_SKY_PLATFORM = 16

ID_ENT_BLACK_BACKGROUND = 17

ID_ENT_BG_WIDE_CLOUD = 18
ID_ENT_BG_GOAL = 19
ID_ENT_END_PORTAL = 22
ID_ENT_LUCKY_BLOCK = 21

ID_ENT_GRASS_BLOCK = 23
ID_ENT_BRICK = 24
ID_ENT_SCREW_BLOCK = 25
ID_ENT_SCREW_BLOCK_HOVER_PLATFORM = 26
ID_ENT_PIPE = 27
ID_ENT_COIN = 28

ID_ENT_EFFECT = 29

ID_ENT_MUSHROOM = 30
ID_ENT_FIRE_LEAF = 31

# Animation IDs
ID_ANIM_MARIO_SMALL = 100000
ID_ANIM_MARIO_SUPER = 200000
ID_ANIM_MARIO_RACCOON = 300000
ID_ANIM_MARIO_DIE = 400000

ID_ANIM_MARIO_IDLE = 10
ID_ANIM_MARIO_WALK = 20
ID_ANIM_MARIO_SPRINT = 30
ID_ANIM_MARIO_SKID = 40
ID_ANIM_MARIO_JUMP = 50
ID_ANIM_MARIO_JUMP_ALT = 1
ID_ANIM_MARIO_POWERJUMP = 60
ID_ANIM_MARIO_SIT = 70
ID_ANIM_MARIO_FLY = 80
ID_ANIM_MARIO_HOLD_IDLE = 90
ID_ANIM_MARIO_HOLD = 1
ID_ANIM_MARIO_HOLD_JUMP = 2
ID_ANIM_MARIO_HOLD_FRONT = 3
ID_ANIM_MARIO_KICK = 100

ID_ANIM_MARIO_SUPER_BONKED = 110

# Red troopa
ID_ANIM_RED_TROOPAS_WALK = 400
ID_ANIM_RED_TROOPAS_SHELL = 410
ID_ANIM_RED_TROOPAS_SHELL_SLIDE = 420
ID_ANIM_RED_TROOPAS_REVIVE_SLOW = 430
ID_ANIM_RED_TROOPAS_REVIVE_FAST = 440

# Goomba
ID_ANIM_GOOMBA_WALK = 500
ID_ANIM_GOOMBA_DIE = 510

# Paragoomba
ID_ANIM_PARAGOOMBA_WALK = 600
ID_ANIM_PARAGOOMBA_DIE = 610

# Wings
ID_ANIM_WINGS_FLAP = 1200
ID_ANIM_WINGS_FLAP_UP = 1210
ID_ANIM_WINGS_FLAP_DOWN = 1220

# Bullet
ID_ANIM_BULLET = 1300

# Effects
ID_ANIM_EFFECT_BONK = 2900
ID_ANIM_EFFECT_PIRANHA_DIE = 2910
ID_ANIM_EFFECT_POINT_100 = 2920
ID_ANIM_EFFECT_POINT_200 = 2921
ID_ANIM_EFFECT_POINT_400 = 2922
ID_ANIM_EFFECT_POINT_800 = 2923
ID_ANIM_EFFECT_POINT_1000 = 2924
ID_ANIM_EFFECT_POINT_2000 = 2925
ID_ANIM_EFFECT_POINT_4000 = 2926
ID_ANIM_EFFECT_POINT_8000 = 2927

ID_ANIM_EFFECT_COIN = 2930
ID_ANIM_EFFECT_SMOKE = 2940

# Mushroom
ID_ANIM_MUSHROOM = 3000

# Fire leaf
ID_ANIM_FIRE_LEAF = 3100

# Red piranha
ID_ANIM_RED_PIRANHA_LOOK_DOWN = 900
ID_ANIM_RED_PIRANHA_LOOK_UP = 910
ID_ANIM_RED_PIRANHA_LOOK_DOWN_OPEN = 920
ID_ANIM_RED_PIRANHA_LOOK_UP_OPEN = 930

# Brick
ID_ANIM_BRICK = 2400

# Coin
ID_ANIM_COIN = 2800

# Lucky block
ID_ANIM_LUCKY_BLOCK = 2100
ID_ANIM_LUCKY_BLOCK_CLAIMED = 2110

# End portal
ID_ANIM_END_PORTAL = 2200

# Sprite IDs
ID_SPRITE_GROUND_TOP_LEFT = 1000
ID_SPRITE_GROUND_TOP_MID = 1010
ID_SPRITE_GROUND_TOP_RIGHT = 1020
ID_SPRITE_GROUND_BOT_LEFT = 1030
ID_SPRITE_GROUND_BOT_MID = 1040
ID_SPRITE_GROUND_BOT_RIGHT = 1050
ID_SPRITE_INDEPENDENT_PLATFORM = 1060

# Bushes
ID_SPRITE_BUSH_LITTLE = 1100

ID_SPRITE_BUSH_LEFT_SIDE = 1110
ID_SPRITE_BUSH_RIGHT_SIDE = 1120
ID_SPRITE_BUSH_MID = 1130

ID_SPRITE_BUSH_OUTER_TOP_LEFT = 1140
ID_SPRITE_BUSH_OUTER_TOP_RIGHT = 1150

ID_SPRITE_BUSH_INNER_TOP_LEFT = 1160
ID_SPRITE_BUSH_INNER_TOP_RIGHT = 1170

ID_SPRITE_END_BUSH_LEFT_SIDE = 1101
ID_SPRITE_END_BUSH_RIGHT_SIDE = 1111
ID_SPRITE_END_BUSH_TOP_LEFT = 1121
ID_SPRITE_END_BUSH_TOP_RIGHT = 1131

# Screw block, white (color 0)
ID_SPRITE_SCREW_BLOCK_WHITE_TOP_LEFT = 2500
ID_SPRITE_SCREW_BLOCK_WHITE_TOP_MID = 2501
ID_SPRITE_SCREW_BLOCK_WHITE_TOP_RIGHT = 2502
ID_SPRITE_SCREW_BLOCK_WHITE_MID_LEFT = 2503
ID_SPRITE_SCREW_BLOCK_WHITE_MID_MID = 2504
ID_SPRITE_SCREW_BLOCK_WHITE_MID_RIGHT = 2505
ID_SPRITE_SCREW_BLOCK_WHITE_BOT_LEFT = 2506
ID_SPRITE_SCREW_BLOCK_WHITE_BOT_MID = 2507
ID_SPRITE_SCREW_BLOCK_WHITE_BOT_RIGHT = 2508

# Screw block, pink (color 1)
ID_SPRITE_SCREW_BLOCK_PINK_TOP_LEFT = 2510
ID_SPRITE_SCREW_BLOCK_PINK_TOP_MID = 2511
ID_SPRITE_SCREW_BLOCK_PINK_TOP_RIGHT = 2512
ID_SPRITE_SCREW_BLOCK_PINK_MID_LEFT = 2513
ID_SPRITE_SCREW_BLOCK_PINK_MID_MID = 2514
ID_SPRITE_SCREW_BLOCK_PINK_MID_RIGHT = 2515
ID_SPRITE_SCREW_BLOCK_PINK_BOT_LEFT = 2516
ID_SPRITE_SCREW_BLOCK_PINK_BOT_MID = 2517
ID_SPRITE_SCREW_BLOCK_PINK_BOT_RIGHT = 2518

# Screw block, blue (color 2)
ID_SPRITE_SCREW_BLOCK_BLUE_TOP_LEFT = 2520
ID_SPRITE_SCREW_BLOCK_BLUE_TOP_MID = 2521
ID_SPRITE_SCREW_BLOCK_BLUE_TOP_RIGHT = 2522
ID_SPRITE_SCREW_BLOCK_BLUE_MID_LEFT = 2523
ID_SPRITE_SCREW_BLOCK_BLUE_MID_MID = 2524
ID_SPRITE_SCREW_BLOCK_BLUE_MID_RIGHT = 2525
ID_SPRITE_SCREW_BLOCK_BLUE_BOT_LEFT = 2526
ID_SPRITE_SCREW_BLOCK_BLUE_BOT_MID = 2527
ID_SPRITE_SCREW_BLOCK_BLUE_BOT_RIGHT = 2528

# Screw block, green (color 3)
ID_SPRITE_SCREW_BLOCK_GREEN_TOP_LEFT = 2530
ID_SPRITE_SCREW_BLOCK_GREEN_TOP_MID = 2531
ID_SPRITE_SCREW_BLOCK_GREEN_TOP_RIGHT = 2532
ID_SPRITE_SCREW_BLOCK_GREEN_MID_LEFT = 2533
ID_SPRITE_SCREW_BLOCK_GREEN_MID_MID = 2534
ID_SPRITE_SCREW_BLOCK_GREEN_MID_RIGHT = 2535
ID_SPRITE_SCREW_BLOCK_GREEN_BOT_LEFT = 2536
ID_SPRITE_SCREW_BLOCK_GREEN_BOT_MID = 2537
ID_SPRITE_SCREW_BLOCK_GREEN_BOT_RIGHT = 2538

# Screw block shading
ID_SPRITE_SCREW_BLOCK_SHADE_LEFT = 2550
ID_SPRITE_SCREW_BLOCK_SHADE_TOP = 2551
ID_SPRITE_SCREW_BLOCK_SHADE_BOT_LEFT = 2552
ID_SPRITE_SCREW_BLOCK_SHADE_TOP_LEFT = 2553
ID_SPRITE_SCREW_BLOCK_SHADE_TOP_RIGHT = 2554

# Clouds
ID_SPRITE_CLOUD_TOP_LEFT = 1500
ID_SPRITE_CLOUD_TOP_MID = 1510
ID_SPRITE_CLOUD_TOP_RIGHT = 1520
ID_SPRITE_CLOUD_BOT_LEFT = 1530
ID_SPRITE_CLOUD_BOT_MID = 1540
ID_SPRITE_CLOUD_BOT_RIGHT = 1550

ID_SPRITE_CLOUD_FLOWER = 1501
ID_SPRITE_CLOUD_STAR = 1502
ID_SPRITE_CLOUD_MUSHROOM = 1503

# Pipe
ID_SPRITE_PIPE_TOP_LEFT = 2700
ID_SPRITE_PIPE_TOP_RIGHT = 2710
ID_SPRITE_PIPE_BOT_LEFT = 2720
ID_SPRITE_PIPE_BOT_RIGHT = 2730

# Sky platform
ID_SPRITE_SKY_PLATFORM = 1600

# Black background
ID_SPRITE_BLACK_BACKGROUND_SOLID = 1700
ID_SPRITE_BLACK_BACKGROUND_BARRIER = 1710

# End portal
ID_SPRITE_END_PORTAL_TOP_LEFT = 2200
ID_SPRITE_END_PORTAL_TOP_MID = 2210
ID_SPRITE_END_PORTAL_TOP_RIGHT = 2220
ID_SPRITE_END_PORTAL_MID_LEFT = 2230
ID_SPRITE_END_PORTAL_MID_MID = 2240
ID_SPRITE_END_PORTAL_MID_RIGHT = 2250
ID_SPRITE_END_PORTAL_BOT_LEFT = 2260
ID_SPRITE_END_PORTAL_BOT_MID = 2270
ID_SPRITE_END_PORTAL_BOT_RIGHT = 2280

# HUD
ID_SPRITE_HUD_BOARD = 2900
ID_SPRITE_HUD_BOARD_BACKGROUND = 2901
ID_SPRITE_HUD_PMETER_ARROW_EMPTY = 2902
ID_SPRITE_HUD_PMETER_ARROW_FULL = 2903
ID_SPRITE_HUD_PMETER_BADGE_EMPTY = 2904
ID_SPRITE_HUD_PMETER_BADGE_FULL = 2905
ID_SPRITE_HUD_M_BADGE = 2906
ID_SPRITE_HUD_L_BADGE = 2907
ID_SPRITE_HUD_PAUSE = 2908
ID_SPRITE_HUD_FIREFLOWER = 2909
ID_SPRITE_HUD_MUSHROOM = 2910
ID_SPRITE_HUD_STAR = 2911
ID_SPRITE_HUD_POWERUP_SLOT = 2912
"""Game entities: player, goal and obstacles"""

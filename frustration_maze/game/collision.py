"""
Collision detection between the player and the level geometry
"""

from frustration_maze.utils.helpers import circles_collide, square_overlaps_rect


class CollisionHandler:
    """
    Handles all collision detection in the game

    Walls use an axis-aligned box test against the player's bounding square;
    obstacles and the goal use circle-circle distance tests.
    """
    def hits_wall(self, player, walls):
        """Return the first wall the player overlaps, or None"""
        half = player.radius
        for wall in walls:
            if square_overlaps_rect(player.x, player.y, half,
                                    wall.x, wall.y, wall.width, wall.height):
                return wall
        return None

    def hits_obstacle(self, player, obstacle_field):
        """Return the first obstacle the player touches, or None"""
        return obstacle_field.check_collision(player.x, player.y, player.radius)

    def reached_goal(self, player, goal):
        """Check if the player overlaps the goal"""
        return circles_collide(player.x, player.y, player.radius,
                               goal.x, goal.y, goal.radius)

    def check_player_position(self, player, level):
        """
        Check player's current position against the level

        Wall and obstacle hits are fatal and skip the goal check.

        Args:
            player: Player object
            level: Level object (walls, obstacle field, goal)

        Returns:
            Dictionary with collision results:
            {
                'wall': Wall or None,
                'obstacle': Obstacle or None,
                'goal': bool,
                'player_died': bool
            }
        """
        result = {
            'wall': None,
            'obstacle': None,
            'goal': False,
            'player_died': False
        }

        wall = self.hits_wall(player, level.walls)
        if wall is not None:
            result['wall'] = wall
            result['player_died'] = True
        else:
            obstacle = self.hits_obstacle(player, level.obstacle_field)
            if obstacle is not None:
                result['obstacle'] = obstacle
                result['player_died'] = True

        if not result['player_died']:
            result['goal'] = self.reached_goal(player, level.goal)

        return result

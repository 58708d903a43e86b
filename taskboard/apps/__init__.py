"""Applications served by TaskBoard"""

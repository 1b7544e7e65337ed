"""Breakout: paddle, ball and bricks, plus a small movement demo."""
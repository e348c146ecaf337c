"""
Opponent module for the TicTacToe engine.
Heuristic tiers (Easy, Medium, Hard) and the minimax Expert.
"""

from .config import OpponentConfig
from .heuristics import HeuristicPlayer, find_winning_move, would_create_threat
from .ai_player import AIPlayer
from .strategy_selector import StrategySelector

"""Unit tests for /src/gobblet/moves.py"""

from src.gobblet.moves import Move
from src.gobblet.pieces import PieceSize
from src.gobblet.player import Player
from src.gobblet.square import Square


def test_placement_from_reserve(human: Player) -> None:
    move = Move(human.id, None, Square(1, 1), human.pieces[0])
    assert move.is_placement


def test_move_from_board(human: Player) -> None:
    move = Move(human.id, Square(0, 0), Square(1, 1), human.pieces[0])
    assert not move.is_placement


def test_clone_resolves_piece_from_cloned_reserve(
    human: Player, computer: Player
) -> None:
    piece = human.pieces[4]
    move = Move(human.id, None, Square(2, 0), piece)
    cloned_players = [human.clone(), computer.clone()]

    cloned = move.clone(cloned_players)
    assert cloned == move
    assert cloned.piece is cloned_players[0].pieces[4]


def test_clone_recreates_piece_no_longer_in_reserve(
    human: Player, computer: Player
) -> None:
    piece = human.pieces[0]
    human.remove_piece(piece)
    move = Move(human.id, Square(0, 1), Square(2, 0), piece)

    cloned = move.clone([human.clone(), computer.clone()])
    assert cloned.piece.id == piece.id
    assert cloned.piece.size == PieceSize.SM
    assert cloned.from_square == Square(0, 1)


def test_data_conversion(human: Player) -> None:
    placement = Move(human.id, None, Square(0, 2), human.pieces[2])
    repositioning = Move(human.id, Square(1, 1), Square(0, 2), human.pieces[5])

    assert placement.to_data()["from"] is None
    assert placement.to_data()["to"] == [0, 2]
    assert Move.from_data(placement.to_data()) == placement
    assert Move.from_data(repositioning.to_data()) == repositioning

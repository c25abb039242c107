from enum import Enum

class Pos(Enum):
    """
    Screen position of a subtitle. PosNotSpecified leaves the choice to the player (usually bottom).
    """
    PosNotSpecified = 0
    BottomLeft = 1
    Bottom = 2
    BottomRight = 3
    Left = 4
    Center = 5
    Right = 6
    TopLeft = 7
    Top = 8
    TopRight = 9

# Position tokens accepted in options, e.g. "-pos TR"
pos_tokens : dict[str, Pos] = {
    'TL': Pos.TopLeft, 'T': Pos.Top, 'TR': Pos.TopRight,
    'L': Pos.Left, 'C': Pos.Center, 'R': Pos.Right,
    'BL': Pos.BottomLeft, 'B': Pos.Bottom, 'BR': Pos.BottomRight,
}

def ParsePos(token : str) -> Pos:
    """
    Get the position for an option token (case-insensitive), raising ValueError if it is not recognised
    """
    pos = pos_tokens.get(token.strip().upper())
    if pos is None:
        raise ValueError(f"Invalid pos value: {token}")
    return pos

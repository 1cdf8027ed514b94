"""PGN text shared by the test modules."""

RUY_LOPEZ_PGN = '[White "A"][Black "B"][Result "1-0"] 1. e4 e5 2. Nf3 Nc6 3. Bb5 1-0'
RUY_LOPEZ_FEN = "r1bqkbnr/pppp1ppp/2n5/1B2p3/4P3/5N2/PPPP1PPP/RNBQK2R b KQkq - 3 3"

ILLEGAL_KING_PGN = '[White "A"][Black "B"][Result "*"] 1. e4 e5 2. Ke3 *'

MISSING_WHITE_PGN = '[Black "B"][Result "1-0"] 1. e4 1-0'

SCHOLARS_MATE_PGN = (
    '[Event "Casual Game"]\n'
    '[Site "https://example.org/game/42"]\n'
    '[Date "2024.05.01"]\n'
    '[Round "1"]\n'
    '[White "Magnus Carlsen"]\n'
    '[Black "Hikaru Nakamura"]\n'
    '[Result "1-0"]\n'
    '[WhiteElo "2830"]\n'
    '[BlackElo "2790"]\n'
    "\n"
    "1. e4 e5 2. Qh5 Nc6 3. Bc4 Nf6 4. Qxf7# 1-0\n"
)
SCHOLARS_MATE_FEN = "r1bqkb1r/pppp1Qpp/2n2n2/4p3/2B1P3/8/PPPP1PPP/RNB1K1NR b KQkq - 0 4"

CASTLING_PGN = (
    '[White "Player1"]\n'
    '[Black "Player2"]\n'
    '[Result "*"]\n'
    "\n"
    "1. e4 e5 2. Nf3 Nc6 3. Bc4 Bc5 4. O-O Nf6 *\n"
)
CASTLING_FEN = "r1bqk2r/pppp1ppp/2n2n2/2b1p3/2B1P3/5N2/PPPP1PPP/RNBQ1RK1 w kq - 6 5"

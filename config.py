# config.py

class Config:
    def __init__(self):
        # ================================================================
        #                      棋盘几何 (5x5x5 立方体)
        # ================================================================
        self.BOARD_SIZE = 5
        self.NUM_CELLS = self.BOARD_SIZE ** 3
        self.LINE_LENGTH = 5
        # 75 axis rows + 30 face diagonals + 4 space diagonals
        self.NUM_LINES = 109
        self.CENTER = (2, 2, 2)

        # ================================================================
        #                      评估模型配置
        # ================================================================
        # f[0..3]: 我方 4/3/2/1 子的未封堵线; f[4..7]: 对方同理
        self.NUM_FEATURES = 8
        self.NUM_WEIGHTS = self.NUM_FEATURES + 1  # + bias
        self.LEARNING_RATE = 0.1

        # Seed row, used for every ply when no weight file exists yet.
        self.INITIAL_WEIGHTS = (8.0, 4.0, 2.0, 1.0, -8.0, -4.0, -2.0, -1.0, 1.0)

        # ================================================================
        #                      Agent 行为开关
        # ================================================================
        self.PLAYER_NAME = "TequilaBot"

        # Block an opponent four-in-a-row before falling back to the evaluator.
        # Off by default: the learned weights were trained without it.
        self.ENABLE_DEFENSIVE_BLOCK = False

        # False = play the tournament with frozen weights (on_match_ends is a no-op).
        self.ENABLE_LEARNING = True

        # Draws have y = 0 and tend to pull every row towards zero.
        self.LEARN_FROM_DRAWS = True

        # ================================================================
        #                      持久化
        # ================================================================
        self.WEIGHTS_FILE = "weightsTequilaBot.txt"
        # temp file + os.replace, so an interrupted save never leaves a torn file
        self.ATOMIC_SAVE = True

        # ================================================================
        #                      训练脚本 (main.py)
        # ================================================================
        self.NUM_TRAINING_MATCHES = 100
        self.OUTPUTS_DIR = "outputs"
        self.LOG_FILE = "outputs/training.log"
        self.RANDOM_SEED = None

        self.CURRENT_CONFIG = "TequilaBot_PerPly_Rational"

config = Config()

from cricviz.domain.cricketer import Cricketer

CLASSICAL_BATTERS: tuple[Cricketer, ...] = (
    Cricketer(
        name="Sachin Tendulkar",
        country="India",
        role="Batter",
        matches=200,
        innings_batted=329,
        not_out=33,
        runs_scored=15921,
        balls_faced=None,
        high_score=248,
        centuries=51,
        half_centuries=68,
    ),
    Cricketer(
        name="Rahul Dravid",
        country="India",
        role="Batter",
        matches=164,
        innings_batted=286,
        not_out=32,
        runs_scored=13288,
        balls_faced=31258,
        high_score=270,
        centuries=36,
        half_centuries=63,
    ),
    Cricketer(
        name="Kumar Sangakkara",
        country="Sri Lanka",
        role="Wicketkeeper",
        matches=134,
        innings_batted=233,
        not_out=17,
        runs_scored=12400,
        balls_faced=22882,
        high_score=319,
        centuries=38,
        half_centuries=52,
    ),
    Cricketer(
        name="Ricky Ponting",
        country="Australia",
        role="Batter",
        matches=168,
        innings_batted=287,
        not_out=29,
        runs_scored=13378,
        balls_faced=22782,
        high_score=257,
        centuries=41,
        half_centuries=62,
    ),
    Cricketer(
        name="Brian Lara",
        country="West Indies",
        role="Batter",
        matches=131,
        innings_batted=232,
        not_out=6,
        runs_scored=11953,
        balls_faced=19753,
        high_score=400,
        centuries=34,
        half_centuries=48,
    ),
)

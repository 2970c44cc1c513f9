#########################################
##               COLUMNS               ##
#########################################

TARGET = "popularity"

id_columns = ["id", "id_artists"]

text_columns = ["name", "artists", "release_date"]

# numeric-looking columns that are categorical, picked after reviewing the density plots
categorical_columns = ["explicit", "mode", "key", "time_signature"]

binary_labels = {
    "explicit": {0: "Clean", 1: "Explicit"},
    "mode": {0: "Minor", 1: "Major"},
}

corr_columns = [
    "popularity",
    "duration_ms",
    "danceability",
    "energy",
    "loudness",
    "speechiness",
    "acousticness",
    "instrumentalness",
    "liveness",
    "valence",
    "tempo",
    "release_year",
]

scatter_pairs = [
    ("energy", "loudness"),
    ("acousticness", "release_year"),
]


#########################################
##              SAMPLING               ##
#########################################

SAMPLE_SIZE = 1000
RANDOM_STATE = 42


#########################################
##         DOCUMENTED RANGES           ##
#########################################

# (min, max) incl., as documented by the audio-feature API
value_ranges = {
    "popularity": (0, 100),
    "danceability": (0.0, 1.0),
    "energy": (0.0, 1.0),
    "speechiness": (0.0, 1.0),
    "acousticness": (0.0, 1.0),
    "instrumentalness": (0.0, 1.0),
    "liveness": (0.0, 1.0),
    "valence": (0.0, 1.0),
    "key": (0, 11),
    "mode": (0, 1),
    "explicit": (0, 1),
    "time_signature": (3, 7),
    "loudness": (-60.0, 5.0),
}


#########################################
##               COLORS                ##
#########################################

colors = {
    "density": "#1DB954",
    "count": "#5EA7E3",
    "scatter": "viridis",
    "corr": "coolwarm",
}

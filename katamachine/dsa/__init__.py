"""Reference implementations of the data structures and algorithms katas."""
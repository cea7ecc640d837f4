"""clubhub package.

Feature modules (persons, events, tasks, attendance, budget) hold the domain
types; ``addressbook`` holds the dataset, its undo/redo history and the
``ModelManager`` facade. A thin command layer and Flask controller sit on top.
"""

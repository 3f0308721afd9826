''' Rules of the two-player trump game: cards, dealing, tricks and the round lifecycle
'''

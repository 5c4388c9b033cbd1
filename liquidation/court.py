"""Court roster for the decree heading and signature."""

COURT_NAME = "Tribunale di Brindisi"

JUDGES = (
    "Dott.ssa Stefania De Angelis",
    "Dott. Ambrogio Colombo",
    "Dott. Leonardo Convertini",
    "Dott.ssa Anna Guidone",
    "Dott. Simone Falerno",
    "Dott.ssa Paola D'Amico",
    "Dott.ssa Margherita Ricci",
    "Dott. Antonio Amato (G.O.T.)",
    "Dott. Roberto De Matteis (G.O.T.)",
    "Dott. Giuseppe Caputo (G.O.T.)",
    "Dott. Giuseppe Lanzillotta (G.O.T.)",
    "Dott.ssa Monica Pizza (G.O.T.)",
    "Dott.ssa Maria Raffaella Lopane (G.O.T.)",
)

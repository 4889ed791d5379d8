"""Fixed pool of common words used as wrong answers in the synonym game."""

from typing import Tuple


DISTRACTOR_WORDS: Tuple[str, ...] = (
    "felicidade", "tristeza", "alegria", "raiva", "medo", "surpresa", "nojo", "confiança",
    "esperança", "orgulho", "vergonha", "culpa", "inveja", "ciúme", "amor", "ódio",
    "paz", "guerra", "luz", "trevas", "calor", "frio", "vida", "morte",
    "rico", "pobre", "grande", "pequeno", "alto", "baixo", "rápido", "lento",
    "bonito", "feio", "novo", "velho", "fácil", "difícil", "certo", "errado",
    "abrir", "fechar", "começar", "terminar", "ganhar", "perder", "subir", "descer",
    "dia", "noite", "sol", "lua", "água", "fogo", "terra", "ar", "cão", "gato",
    "pássaro", "peixe", "casa", "carro", "comida", "bebida", "trabalho", "lazer", "amigo", "inimigo",
)

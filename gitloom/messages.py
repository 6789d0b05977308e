"""User-facing message catalogue."""

MESSAGE_ROOT_SHORT = "Automatiza fluxos de trabalho com Git"
MESSAGE_COMMIT_SHORT = "Gera commits semanticos a partir das mudancas staged"
MESSAGE_DRY_RUN_FLAG = "mostra a mensagem gerada sem criar o commit"
MESSAGE_YES_FLAG = "cria o commit sem pedir confirmacao"
MESSAGE_PREVIEW_FLAG = "mostra preview do diff e do impacto dos commits planejados"
MESSAGE_STRICT_FLAG = "falha quando o plano nao atinge o nivel minimo de qualidade"
MESSAGE_VERBOSE_FLAG = "expande a analise com detalhes tecnicos e contexto adicional"
MESSAGE_JSON_FLAG = "renderiza a revisao em json para automacao"
MESSAGE_OPTIMIZE_FLAG = "aplica sugestoes automaticas de agrupamento antes de exibir o plano"
MESSAGE_FORCE_FLAG = "sobrescreve o arquivo de configuracao se ele ja existir"
MESSAGE_COMMIT_GENERATED = "commit gerado"
MESSAGE_COMMIT_CREATED = "commit criado: %s"
MESSAGE_COMMIT_CANCELED = "commit cancelado"
MESSAGE_COMMIT_FINISHED = "fluxo finalizado com sucesso"
MESSAGE_COMMIT_PLAN_QUESTION = "criar commits planejados?"
MESSAGE_APPLY_SUGGESTIONS = "aplicar sugestoes automaticamente?"
MESSAGE_CREATE_BLOCK_QUESTION = "criar bloco %d/%d?"
MESSAGE_IGNORED_BLOCK = "bloco %d ignorado"
MESSAGE_CHANGED_FILES = "arquivos em changes:"
MESSAGE_STAGE_CHANGED_QUESTION = "adicionar arquivos em changes ao staged?"
MESSAGE_EMPTY_DIFF = (
    "nenhuma mudanca staged encontrada; execute git add antes de gitloom commit"
)
MESSAGE_PARTIAL_STAGE = (
    "arquivos parcialmente staged ainda nao sao suportados neste fluxo automatico; "
    "finalize ou descarte as mudancas unstaged antes de continuar"
)
MESSAGE_STRICT_MODE_FAILED = (
    "modo estrito falhou: existem commits com qualidade abaixo do minimo aceitavel"
)
MESSAGE_COMMIT_PROMPT_SUFFIX = "[Y/n]: "
MESSAGE_FILES_LABEL = "arquivos"
MESSAGE_DETAILS_LABEL = "detalhes"
MESSAGE_TYPE_LABEL = "tipo"
MESSAGE_SCOPE_LABEL = "escopo"
MESSAGE_INTENT_LABEL = "intencao"
MESSAGE_DESCRIPTION_LABEL = "descricao"
MESSAGE_HEADER_LABEL = "mensagem"
MESSAGE_PREVIEW_LABEL = "preview"
MESSAGE_QUALITY_LABEL = "qualidade"
MESSAGE_SUGGESTIONS_LABEL = "sugestoes"
MESSAGE_IMPACT_LABEL = "impacto"
MESSAGE_COMMIT_LABEL = "commit %d/%d"
MESSAGE_COMMIT_FAREWELL = "ate a proxima"
MESSAGE_ANALYZE_SHORT = "Analisa o plano de commits sem criar commits"
MESSAGE_VERSION_SHORT = "Mostra a versao do gitloom"
MESSAGE_CONFIG_SHORT = "Gerencia a configuracao do gitloom"
MESSAGE_CONFIG_INIT_SHORT = "Cria um arquivo .gitloom.yaml inicial"
MESSAGE_DOCTOR_SHORT = (
    "Valida se o repositorio e o ambiente estao prontos para o gitloom"
)
MESSAGE_UPDATE_SHORT = "Atualiza o gitloom para a versao mais recente"
MESSAGE_CONFIG_EXISTS = ".gitloom.yaml ja existe; use --force para sobrescrever"
MESSAGE_CONFIG_CREATED = "arquivo de configuracao criado: %s"